import yaml
from pathlib import Path
from flask import request, g, current_app, has_request_context

LANGUAGES = ['en', 'te']
TRANSLATIONS_DIR = Path(__file__).resolve().parent.parent / 'translations'

# Cache for translations
_translations_cache = {}
_translation_file_times = {}


def load_translations():
    """Load translations from YAML files with hot-reloading in debug mode"""
    global _translations_cache

    # In production, use cached translations
    if not current_app.debug and _translations_cache:
        return _translations_cache

    # Check if any translation files have been modified
    reload_needed = False
    for lang in LANGUAGES:
        file_path = TRANSLATIONS_DIR / f'{lang}.yaml'
        try:
            current_mtime = file_path.stat().st_mtime
            if (file_path not in _translation_file_times or
                    _translation_file_times[file_path] != current_mtime):
                _translation_file_times[file_path] = current_mtime
                reload_needed = True
        except FileNotFoundError:
            continue

    if reload_needed or not _translations_cache:
        print("[Translations] Reloading language files...")
        translations = {}
        for lang in LANGUAGES:
            try:
                with open(TRANSLATIONS_DIR / f'{lang}.yaml', 'r', encoding='utf-8') as f:
                    translations[lang] = yaml.safe_load(f) or {}
            except FileNotFoundError:
                print(f"Warning: Translation file translations/{lang}.yaml not found")
                translations[lang] = {}
        _translations_cache = translations

    return _translations_cache


def get_language():
    """Detect language from Accept-Language header"""
    if not has_request_context():
        return 'en'
    if hasattr(g, 'language'):
        return g.language

    # Telugu if the client lists it at all, English otherwise
    accept_lang = request.headers.get('Accept-Language', '').lower()
    tags = [part.split(';')[0].strip() for part in accept_lang.split(',')]
    g.language = 'te' if any(tag.split('-')[0] == 'te' for tag in tags) else 'en'

    return g.language


def t(key, *args, **kwargs):
    """Translate key to current language"""
    lang = get_language()
    translations = load_translations()
    translation = translations.get(lang, {}).get(key, translations.get('en', {}).get(key, key))

    if args or kwargs:
        try:
            if kwargs:
                return translation.format(**kwargs)
            return translation.format(*args)
        except (IndexError, KeyError) as e:
            print(f"Warning: Translation formatting error for key '{key}': {e}")
            return translation

    return translation
