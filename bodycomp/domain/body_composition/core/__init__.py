"""Core building blocks of the body composition domain."""
