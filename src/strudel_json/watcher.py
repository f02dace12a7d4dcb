"""Watch mode: regenerate strudel.json when sample folders change.

Filesystem events are delivered by a watchdog observer thread. Each relevant
event re-arms a single debounce timer, so a burst of events (copying a folder
of samples, for example) produces one regeneration once things go quiet.
"""

import os
import sys
import threading
from pathlib import Path
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler, FileSystemMovedEvent
from watchdog.observers import Observer

from .config import DEBOUNCE_SECONDS, MANIFEST_FILENAME
from .core.errors import GenerationError
from .core.types import UrlSource
from .generator import generate_strudel_json

# Events deeper than <root>/<folder>/<entry> are not observed
MAX_EVENT_DEPTH = 2

# How often the main loop wakes up to check the stop event
POLL_INTERVAL_SECONDS = 0.5


class Debouncer:
    """Single-slot timer that runs a callback after a quiet period.

    Calling schedule() cancels the pending timer, if any, and arms a new one,
    so at most one callback is ever pending.

    Example:
        >>> debouncer = Debouncer(lambda: print("go"), delay=1.0)
        >>> debouncer.schedule()
        >>> debouncer.schedule()  # restarts the delay; "go" prints once
    """

    def __init__(
        self,
        callback: Callable[[], None],
        delay: float = DEBOUNCE_SECONDS,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        self.callback = callback
        self.delay = delay
        self._timer_factory = timer_factory
        self._timer: threading.Timer | None = None
        self._token = 0
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def schedule(self) -> None:
        """(Re)start the delay before the callback runs."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()

            self._token += 1
            timer = self._timer_factory(self.delay, self._fire, args=(self._token,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> None:
        """Drop the pending callback, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._token += 1

    def _fire(self, token: int) -> None:
        with self._lock:
            # A timer that was re-armed or cancelled after it started firing is stale
            if token != self._token:
                return
            self._timer = None

        self.callback()


class SampleDirectoryEventHandler(FileSystemEventHandler):
    """Forward additions and removals near the root to a change callback.

    Only the root's entries and the entries of its immediate subdirectories
    count. Events on strudel.json itself are ignored so writing the manifest
    never triggers another regeneration.
    """

    def __init__(self, root_path: Path, on_change: Callable[[], None]):
        super().__init__()
        self.root_path = root_path
        self.on_change = on_change

    def is_relevant(self, path: str | bytes) -> bool:
        try:
            relative = Path(os.fsdecode(path)).relative_to(self.root_path)
        except ValueError:
            return False

        if not relative.parts or len(relative.parts) > MAX_EVENT_DEPTH:
            return False

        return relative.name != MANIFEST_FILENAME

    def on_created(self, event: FileSystemEvent) -> None:
        self._handle("added", event.src_path, event.is_directory)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._handle("removed", event.src_path, event.is_directory)

    def on_moved(self, event: FileSystemEvent) -> None:
        self._handle("removed", event.src_path, event.is_directory)
        if isinstance(event, FileSystemMovedEvent):
            self._handle("added", event.dest_path, event.is_directory)

    def _handle(self, action: str, path: str | bytes, is_directory: bool) -> None:
        if not self.is_relevant(path):
            return

        kind = "Directory" if is_directory else "File"
        print(f"{kind} {action}: {os.fsdecode(path)}", file=sys.stderr)
        self.on_change()


class Regenerator:
    """Run generation, reporting failures instead of raising them.

    Runs are serialized: a regeneration requested while one is in progress
    starts after it finishes.
    """

    def __init__(self, root_path: Path, url_source: UrlSource):
        self.root_path = root_path
        self.url_source = url_source
        self.runs = 0
        self.failures = 0
        self._lock = threading.Lock()

    def __call__(self) -> None:
        with self._lock:
            self.runs += 1
            print(f"Regenerating {MANIFEST_FILENAME}...", file=sys.stderr)
            try:
                generate_strudel_json(self.root_path, self.url_source)
            except (GenerationError, OSError) as e:
                self.failures += 1
                print(f"Error: {e}", file=sys.stderr)


def watch(
    root_path: Path,
    url_source: UrlSource,
    debounce_seconds: float = DEBOUNCE_SECONDS,
    stop_event: threading.Event | None = None,
) -> None:
    """Generate strudel.json, then regenerate it whenever the samples change.

    Blocks until interrupted (Ctrl+C) or until stop_event is set.

    Args:
        root_path: Directory containing the sample folders
        url_source: Where the base URL comes from
        debounce_seconds: Quiet period before regenerating
        stop_event: Optional event that ends the loop when set

    Raises:
        GenerationError: If the initial generation fails
    """
    root_path_abs = root_path.resolve()

    print(f"Watch mode enabled. Monitoring '{root_path_abs}' for changes...", file=sys.stderr)
    print("Press Ctrl+C to stop.", file=sys.stderr)

    generate_strudel_json(root_path_abs, url_source)

    debouncer = Debouncer(Regenerator(root_path_abs, url_source), debounce_seconds)
    handler = SampleDirectoryEventHandler(root_path_abs, debouncer.schedule)

    observer = Observer()
    observer.schedule(handler, str(root_path_abs), recursive=True)
    observer.start()

    if stop_event is None:
        stop_event = threading.Event()

    try:
        while not stop_event.is_set():
            stop_event.wait(POLL_INTERVAL_SECONDS)
    except KeyboardInterrupt:
        print("\nStopping watch mode...", file=sys.stderr)
    finally:
        # No events may reach the debouncer once it is cancelled
        observer.stop()
        observer.join()
        debouncer.cancel()
