"""
Watch mode for prettyimports - organize imports once a saved file settles.
"""
import threading
import time
from datetime import datetime
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from prettyimports.support.config import OrganizeImportsConfig
from prettyimports.core.discovery import SUPPORTED_SUFFIXES, is_supported_file


class DebounceHandler(FileSystemEventHandler):
    """
    Calls `callback(path)` once a supported file has been quiet for
    `debounce_seconds`.

    Every event for a path restarts that path's timer, so a save that
    truncates and then rewrites a file is processed once, after the final
    write.
    """

    def __init__(self, callback, debounce_seconds: float = 0.5):
        super().__init__()
        self.callback = callback
        self.debounce_seconds = debounce_seconds
        self._timers: dict[str, threading.Timer] = {}
        self._lock = threading.Lock()

    def on_modified(self, event: FileSystemEvent):
        self._schedule(event)

    def on_created(self, event: FileSystemEvent):
        self._schedule(event)

    def _schedule(self, event: FileSystemEvent):
        if event.is_directory:
            return
        src_path = str(event.src_path)
        if Path(src_path).suffix not in SUPPORTED_SUFFIXES:
            return

        with self._lock:
            pending = self._timers.pop(src_path, None)
            if pending is not None:
                pending.cancel()
            timer = threading.Timer(self.debounce_seconds, self._fire, args=(src_path,))
            timer.daemon = True
            self._timers[src_path] = timer
            timer.start()

    def _fire(self, src_path: str):
        with self._lock:
            self._timers.pop(src_path, None)
        self.callback(Path(src_path))

    @property
    def pending_paths(self) -> list[str]:
        with self._lock:
            return sorted(self._timers)

    def cancel_all(self):
        """Drop every change that has not fired yet."""
        with self._lock:
            for timer in self._timers.values():
                timer.cancel()
            self._timers.clear()


def watch_project(project_root: Path, config: OrganizeImportsConfig, process_file_func):
    """
    Watch a directory and organize imports of changed files.

    Args:
        project_root: Directory to watch recursively
        config: Organize-imports configuration
        process_file_func: Called with each settled file; returns True when
            the file was rewritten
    """
    def on_settled(file_path: Path):
        stamp = datetime.now().strftime("%H:%M:%S")
        if not is_supported_file(file_path, project_root, config):
            return
        try:
            rel_path = file_path.relative_to(project_root)
        except ValueError:
            return

        try:
            if process_file_func(file_path):
                print(f"[{stamp}] ✓ Organized imports in {rel_path}")
        except Exception as e:
            print(f"[{stamp}] ✗ Error processing {rel_path}: {e}")

    handler = DebounceHandler(on_settled, debounce_seconds=config.debounce_seconds)
    observer = Observer()
    observer.schedule(handler, str(project_root), recursive=True)

    print(f"Watching {project_root} for import changes (Ctrl+C to stop)...")
    print()

    try:
        observer.start()
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        print("\nStopping watch mode...")
        observer.stop()
    finally:
        handler.cancel_all()

    observer.join()
    print("Watch mode stopped.")
