# backend/medisafe/services/translation.py
import logging
import threading
from collections import OrderedDict
from typing import List, Optional

import requests

from medisafe.config import settings

log = logging.getLogger("translation")

SOURCE_LANGUAGE = "en"


class TranslationCache:
    """
    `lang:text` -> translated text, least recently used entries evicted past
    `max_size`. Owned by whoever composes the Translator.
    """

    def __init__(self, max_size: int = None):
        self.max_size = max_size if max_size is not None else settings.TRANSLATION_CACHE_SIZE
        self._entries: "OrderedDict[str, str]" = OrderedDict()
        self._lock = threading.Lock()

    @staticmethod
    def key(text: str, language: str) -> str:
        return f"{language}:{text}"

    def get(self, text: str, language: str) -> Optional[str]:
        k = self.key(text, language)
        with self._lock:
            if k not in self._entries:
                return None
            self._entries.move_to_end(k)
            return self._entries[k]

    def put(self, text: str, language: str, translated: str) -> None:
        k = self.key(text, language)
        with self._lock:
            self._entries[k] = translated
            self._entries.move_to_end(k)
            while len(self._entries) > max(self.max_size, 0):
                self._entries.popitem(last=False)

    def __len__(self):
        return len(self._entries)


class Translator:
    """
    Best-effort translation of dynamic English text via the MyMemory API.
    Never raises: on any failure the original text comes back.
    """

    def __init__(self, url: str = None, timeout: float = None,
                 cache: TranslationCache = None, session: requests.Session = None):
        self.url = url or settings.TRANSLATION_URL
        self.timeout = timeout if timeout is not None else settings.TRANSLATION_TIMEOUT_SECONDS
        self.cache = cache if cache is not None else TranslationCache()
        self.http = session or requests

    def translate(self, text: str, target_language: str) -> str:
        if not text or not target_language or target_language == SOURCE_LANGUAGE:
            return text

        cached = self.cache.get(text, target_language)
        if cached is not None:
            return cached

        try:
            params = {"q": text, "langpair": f"{SOURCE_LANGUAGE}|{target_language}"}
            r = self.http.get(self.url, params=params, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
            translated = ((data or {}).get("responseData") or {}).get("translatedText")
        except Exception as e:
            log.warning("Translation to %s failed, using original text: %s", target_language, e)
            return text

        if not translated:
            return text

        # MyMemory echoes the input (often upper-cased) when it cannot translate
        if translated.upper() == text.upper():
            self.cache.put(text, target_language, text)
            return text

        self.cache.put(text, target_language, translated)
        return translated

    def translate_batch(self, texts: List[str], target_language: str) -> List[str]:
        if not texts or target_language == SOURCE_LANGUAGE:
            return texts
        return [self.translate(text, target_language) for text in texts]
