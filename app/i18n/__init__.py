from .core import DEFAULT_LANG, LANGUAGES, current_lang, load_lang, t

__all__ = ["DEFAULT_LANG", "LANGUAGES", "current_lang", "load_lang", "t"]
