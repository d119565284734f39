"""Classpath composition via ordered set subtraction."""

from jpiconfig.core.classpath.composer import ClasspathComposer, ClasspathSet, compose

__all__ = ["ClasspathSet", "ClasspathComposer", "compose"]
