import yaml
from pathlib import Path
from flask import request, g, current_app, has_request_context

DEFAULT_LANGUAGE = 'en'

# Cache for translations
_translations_cache = {}
_translation_file_times = {}

def _translations_dir():
    return Path(current_app.root_path) / 'translations'

def load_translations():
    """Load translations from YAML files with hot-reloading in debug mode"""
    global _translations_cache

    # In production, use cached translations
    if not current_app.debug and _translations_cache:
        return _translations_cache

    # Check if any translation files have been modified
    files = sorted(_translations_dir().glob('*.yaml'))
    reload_needed = False
    for file_path in files:
        current_mtime = file_path.stat().st_mtime
        if _translation_file_times.get(str(file_path)) != current_mtime:
            _translation_file_times[str(file_path)] = current_mtime
            reload_needed = True

    # Reload translations if files changed or cache is empty
    if reload_needed or not _translations_cache:
        print("[Translations] Reloading language files...")
        translations = {}
        for file_path in files:
            with open(file_path, 'r', encoding='utf-8') as f:
                translations[file_path.stem] = yaml.safe_load(f) or {}
        if DEFAULT_LANGUAGE not in translations:
            print(f"Warning: Translation file translations/{DEFAULT_LANGUAGE}.yaml not found")
            translations[DEFAULT_LANGUAGE] = {}
        _translations_cache = translations

    return _translations_cache

def get_language():
    """Detect language from Accept-Language header, limited to shipped translations"""
    if not has_request_context():
        return DEFAULT_LANGUAGE
    if hasattr(g, 'language'):
        return g.language

    available = load_translations().keys()
    g.language = DEFAULT_LANGUAGE
    for accepted in request.accept_languages.values():
        code = accepted.split('-')[0].lower()
        if code in available:
            g.language = code
            break

    return g.language

def t(key, *args, **kwargs):
    """Translate key to current language"""
    lang = get_language()
    translations = load_translations()
    translation = translations.get(lang, {}).get(key, translations[DEFAULT_LANGUAGE].get(key, key))

    # Handle string formatting
    if args or kwargs:
        try:
            if kwargs:
                return translation.format(**kwargs)
            else:
                return translation.format(*args)
        except (IndexError, KeyError, ValueError) as e:
            print(f"Warning: Translation formatting error for key '{key}': {e}")
            return translation

    return translation
