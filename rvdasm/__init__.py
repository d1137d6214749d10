"""Decode and disassemble RISC-V RV32I machine words, plus small command-line tools."""

__version__ = "0.1.0"
__all__ = ["__version__"]