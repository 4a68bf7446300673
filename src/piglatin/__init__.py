"""
Pig latin line converter package.

Modules:
- tokenization: whitespace tokenizer for input lines.
- transform: per-token pig latin rewrite.
- pipeline: file-to-file line conversion.
- config: environment configuration.
- app: command-line entry point.
"""

__version__ = "0.1.0"
