# core/realtime.py
"""
In-process change feed.

Models registered with ``register_model`` publish a ``ChangeEvent`` after
every committed insert, update or delete. Anything in the process can
``feed.subscribe(table, owner_id, callback)``; browsers follow along by
polling ``/changes/<table>/`` which returns a version number that moves on
every publish.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from django.core.cache import cache
from django.core.exceptions import ObjectDoesNotExist
from django.db import transaction
from django.db.models.signals import post_delete, post_save

logger = logging.getLogger(__name__)

VERSION_KEY = "changes:{table}:{owner}"
VERSION_TIMEOUT = None  # versions never expire on their own


@dataclass(frozen=True)
class ChangeEvent:
    table: str
    owner_id: Optional[str]
    event: str  # "INSERT" | "UPDATE" | "DELETE"
    record_id: Optional[str] = None


class ChangeFeed:
    def __init__(self):
        self._subscribers = {}
        self._lock = threading.Lock()

    def subscribe(self, table: str, owner_id, on_change: Callable[[ChangeEvent], None]):
        """
        Call ``on_change(event)`` for every change to ``table``. ``owner_id``
        limits delivery to one user's rows; ``None`` receives all of them.
        Returns a function that removes the subscription.
        """
        key = (table, None if owner_id is None else str(owner_id))
        with self._lock:
            self._subscribers.setdefault(key, []).append(on_change)

        def unsubscribe():
            with self._lock:
                callbacks = self._subscribers.get(key, [])
                if on_change in callbacks:
                    callbacks.remove(on_change)
                if not callbacks:
                    self._subscribers.pop(key, None)

        return unsubscribe

    def publish(self, event: ChangeEvent):
        bump_version(event.table, event.owner_id)

        with self._lock:
            callbacks = list(self._subscribers.get((event.table, event.owner_id), []))
            if event.owner_id is not None:
                callbacks += self._subscribers.get((event.table, None), [])

        for callback in callbacks:
            try:
                callback(event)
            except Exception:
                logger.exception(f"Change subscriber failed for {event.table} ({event.event})")


feed = ChangeFeed()


def change_version(table, owner_id):
    return cache.get(VERSION_KEY.format(table=table, owner=owner_id), 0)


def bump_version(table, owner_id):
    key = VERSION_KEY.format(table=table, owner=owner_id)
    try:
        cache.incr(key)
    except ValueError:
        cache.set(key, 1, VERSION_TIMEOUT)


def _owner_of(instance, owner_field):
    owner_id = instance
    try:
        for part in owner_field.split("."):
            owner_id = getattr(owner_id, part, None)
            if owner_id is None:
                return None
    except ObjectDoesNotExist:
        return None
    return str(owner_id)


def register_model(model, table, owner_field="user_id"):
    """
    Publish changes to ``model`` under ``table``. ``owner_field`` is a
    dotted attribute path from the instance to the owning user's id.
    """

    def on_save(sender, instance, created, **kwargs):
        event = ChangeEvent(table, _owner_of(instance, owner_field),
                            "INSERT" if created else "UPDATE", str(instance.pk))
        transaction.on_commit(lambda: feed.publish(event))

    def on_delete(sender, instance, **kwargs):
        event = ChangeEvent(table, _owner_of(instance, owner_field), "DELETE", str(instance.pk))
        transaction.on_commit(lambda: feed.publish(event))

    uid = f"realtime:{table}"
    post_save.connect(on_save, sender=model, weak=False, dispatch_uid=uid)
    post_delete.connect(on_delete, sender=model, weak=False, dispatch_uid=uid)
