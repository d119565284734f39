"""Core decision logic: version gate, dependency sets, classpath, developers."""
