"""Servicios del Core: orquestación de operaciones sobre la API."""

from core.services.dictionary_client import DictionaryClient

__all__ = ["DictionaryClient"]
