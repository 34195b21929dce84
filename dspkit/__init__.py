"""Fast math approximations, pitch tables, envelope generators and WAV I/O."""

__version__ = "0.1.0"