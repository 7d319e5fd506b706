# core/checks.py
from django.conf import settings
from django.core.checks import Tags, Warning, register

PROCESS_LOCAL_CACHES = (
    "django.core.cache.backends.locmem.LocMemCache",
    "django.core.cache.backends.dummy.DummyCache",
)


@register(Tags.caches, deploy=True)
def check_shared_cache(app_configs, **kwargs):
    """
    Change-feed versions and cached standings must be visible to every
    worker, otherwise ``/changes/<table>/`` answers differently per process.
    """
    backend = settings.CACHES.get("default", {}).get("BACKEND", "")
    if backend in PROCESS_LOCAL_CACHES:
        return [
            Warning(
                f"The default cache ({backend}) is local to one process.",
                hint="Set CACHE_BACKEND and CACHE_LOCATION to a shared cache such as "
                     "RedisCache or DatabaseCache when running more than one worker.",
                id="core.W001",
            )
        ]
    return []
