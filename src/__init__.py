"""FraudShield: LLM-backed scam, phishing and fake-news scanner."""

from fraudshield.version import __version__

__all__ = ["__version__"]
