"""gocoveralls - merge Go coverage profiles and upload them to Coveralls."""

__version__ = "0.1.0"
