"""Wiring of store, directory, agenda and request pipeline."""
from dataclasses import dataclass
from typing import Optional

from src.services.access_gate import AccessGate, RequestPipeline
from src.services.agenda_service import AgendaStore
from src.services.attendee_service import AttendeeDirectory
from src.services.backing_store import BackingStore, JsonBackingStore
from src.utils.config import Settings


@dataclass
class AppServices:
    """Long-lived service objects shared by every page render."""

    settings: Settings
    store: BackingStore
    directory: AttendeeDirectory
    agenda: AgendaStore
    gate: AccessGate
    pipeline: RequestPipeline


def build_services(settings: Settings, store: Optional[BackingStore] = None) -> AppServices:
    """
    Assemble services from settings.

    Args:
        settings: Loaded configuration
        store: Optional store override; defaults to the JSON files in settings
    """
    if store is None:
        store = JsonBackingStore(
            settings.catalog_file,
            settings.attendees_file,
            lock_timeout=settings.lock_timeout,
        )
    directory = AttendeeDirectory(store)
    agenda = AgendaStore(store, directory)
    gate = AccessGate(directory)
    pipeline = RequestPipeline([(gate.name, gate)])
    return AppServices(
        settings=settings,
        store=store,
        directory=directory,
        agenda=agenda,
        gate=gate,
        pipeline=pipeline,
    )
