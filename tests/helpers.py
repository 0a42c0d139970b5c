"""Shared test doubles for the game tests."""

import os

from PySide6.QtCore import QCoreApplication, QEvent


class ScriptedRandom:
    """Deterministic stand-in for random.Random.

    ``random()`` pops from ``rolls``; ``choice()`` pops an index from ``picks``
    (defaulting to the first element) so tie-breaks can be asserted exactly.
    """

    def __init__(self, rolls=(), picks=()):
        self.rolls = list(rolls)
        self.picks = list(picks)
        self.choices_seen = []

    def random(self):
        return self.rolls.pop(0) if self.rolls else 0.0

    def choice(self, seq):
        seq = list(seq)
        self.choices_seen.append(seq)
        index = self.picks.pop(0) if self.picks else 0
        return seq[index]


class ManualScheduler:
    """Collects deferred callbacks so a test decides when they fire."""

    def __init__(self):
        self.pending = []

    def __call__(self, delay_ms, callback):
        self.pending.append((delay_ms, callback))

    def fire_all(self):
        pending, self.pending = self.pending, []
        for _, callback in pending:
            callback()


def dispose(obj):
    """Delete a QObject now instead of leaving it to interpreter teardown."""
    obj.deleteLater()
    QCoreApplication.sendPostedEvents(None, QEvent.Type.DeferredDelete)


def ensure_app():
    """Return the running Qt application, creating an offscreen one if needed."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QCoreApplication.instance()
    if app is not None:
        return app
    try:
        from PySide6.QtWidgets import QApplication
        return QApplication([])
    except ImportError:
        return QCoreApplication([])
