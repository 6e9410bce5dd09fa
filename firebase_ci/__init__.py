"""firebase-ci - Deploy to Firebase from CI environments."""

__version__ = "1.0.0"
