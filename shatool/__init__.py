"""SHA-2 message digests (SHA-224/256/384/512, SHA-512/224, SHA-512/256) and HMACs in pure Python."""

__version__ = "0.1.0"