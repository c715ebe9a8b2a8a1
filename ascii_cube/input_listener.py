#
# PROJECT: ascii-cube
# MODULE: ascii_cube/input_listener.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import queue
import threading

from .actions import DEFAULT_KEY_BINDINGS, key_to_action

logger = logging.getLogger(__name__)

NO_KEY = -1


class InputListener:
    """
    Background key reader.

    A daemon thread calls read_key() in a loop and pushes every key code it
    returns into an unbounded queue. read_key is expected to block for a
    short poll interval (curses getch() with a timeout) and return -1 when
    nothing was pressed; for sources that return immediately, idle_wait
    adds a pause after each empty read.

    The render loop takes at most one key per frame with poll(), so bursts
    of input are spread over consecutive frames.
    """

    def __init__(self, read_key, idle_wait: float = 0.0):
        self._read_key = read_key
        self._idle_wait = idle_wait
        self.events = queue.Queue()
        self._stop = threading.Event()
        self._thread = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="cube-input",
                                        daemon=True)
        self._thread.start()
        logger.debug("input listener started")

    def stop(self, timeout: float = 1.0):
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.debug("input listener stopped")

    def _run(self):
        while not self._stop.is_set():
            try:
                key = self._read_key()
            except Exception:
                logger.exception("key source failed, input listener exiting")
                return
            if key is None or key == NO_KEY:
                if self._idle_wait:
                    self._stop.wait(self._idle_wait)
                continue
            self.events.put(key)

    def poll(self):
        """Non-blocking: the oldest pending key, or None."""
        try:
            return self.events.get_nowait()
        except queue.Empty:
            return None


def poll_action(listener: InputListener, bindings=DEFAULT_KEY_BINDINGS):
    """Drain one pending key and map it to its CubeAction (None if unbound)."""
    key = listener.poll()
    if key is None:
        return None
    action = key_to_action(key, bindings)
    if action is None:
        logger.debug("ignoring unbound key %r", key)
    return action
