"""aptwire: annotation-processor path wiring for javac, Eclipse and IntelliJ IDEA."""

__version__ = "0.1.0"
