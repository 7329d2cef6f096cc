from functools import lru_cache

from libcalhours.core.localization import Translate
from libcalhours.core.localization import default_translate
from libcalhours.services.hours_client import HoursClient
from libcalhours.services.hours_service import MAX_WEEKS
from libcalhours.settings import Settings


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_hours_client() -> HoursClient:
    # One extra week so a window starting late in the week is still covered.
    return HoursClient(get_settings(), weeks=MAX_WEEKS + 1)


def get_translate() -> Translate:
    return default_translate
