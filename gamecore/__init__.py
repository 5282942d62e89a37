"""A small scripting Lisp (gamecore.ebisp) and colour utilities (gamecore.color)."""

__version__ = "0.1.0"