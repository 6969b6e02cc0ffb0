"""CEP address service: local storage with ViaCEP read-through fallback."""

__version__ = "1.0.0"
