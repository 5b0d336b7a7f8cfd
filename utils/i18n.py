# utils/i18n.py

"""Internationalization support."""
import locale


class Translator:
    """Simple translation system for multilingual support."""

    def __init__(self):
        self.current_lang = 'en'
        self.translations = {
            'en': {
                # Progress
                'searching_in': 'Searching In: [{}]',
                'matches': 'Matches',
                'searches': 'Searches',
                'search_size': 'Search Size',
                'elapsed_time': 'Elapsed Time',

                # Results
                'no_matches': 'No matching files found.',
                'found_files': 'Found {} matching file(s).',
                'interrupted': 'Search interrupted by user.',

                # Errors
                'root_unreachable': 'Error: Search root is not accessible: {}',
                'directory_unreadable': 'Warning: Could not list directory {}',
                'config_unreadable': 'Warning: Could not read settings file {}: {}',
                'config_unwritable': 'Warning: Could not write settings file {}: {}',
            },
            'de': {
                # Fortschritt
                'searching_in': 'Suche in: [{}]',
                'matches': 'Treffer',
                'searches': 'Durchsucht',
                'search_size': 'Suchgröße',
                'elapsed_time': 'Verstrichene Zeit',

                # Ergebnisse
                'no_matches': 'Keine passenden Dateien gefunden.',
                'found_files': '{} passende Datei(en) gefunden.',
                'interrupted': 'Suche vom Benutzer abgebrochen.',

                # Fehler
                'root_unreachable': 'Fehler: Suchpfad ist nicht erreichbar: {}',
                'directory_unreadable': 'Warnung: Verzeichnis kann nicht gelesen werden: {}',
                'config_unreadable': 'Warnung: Einstellungsdatei {} kann nicht gelesen werden: {}',
                'config_unwritable': 'Warnung: Einstellungsdatei {} kann nicht geschrieben werden: {}',
            }
        }

        # Auto-detect system language
        try:
            system_lang = locale.getlocale()[0]
        except ValueError:
            system_lang = None
        if system_lang and system_lang.lower().startswith('de'):
            self.current_lang = 'de'

    def set_language(self, lang_code: str):
        """Set the current language."""
        if lang_code in self.translations:
            self.current_lang = lang_code

    def get(self, key: str, *args) -> str:
        """Get translated string, with optional formatting."""
        text = self.translations[self.current_lang].get(key, key)
        if args:
            try:
                return text.format(*args)
            except (IndexError, KeyError):
                return text
        return text

# Global translator instance
translator = Translator()
