"""Thread Safety Example - Sharing one Translator between threads.

Translator lookups share a readers-writer lock; extend/unset/clear/replace
take it exclusively. A replace() is seen by readers as fully old or fully
new, never a mix.

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from phraselex import Translator


def main() -> None:
    """Readers translate while a writer hot-swaps the phrase set."""
    english = {"status": ["{0} job running", "{0} jobs running"]}
    shouting = {"status": ["{0} JOB RUNNING", "{0} JOBS RUNNING"]}
    t = Translator("en", english)
    stop = threading.Event()

    def reload_phrases() -> None:
        for n in range(100):
            t.replace(shouting if n % 2 == 0 else english)
        stop.set()

    def render(worker: int) -> int:
        rendered = 0
        while not stop.is_set():
            t.translate("status", worker)
            rendered += 1
        return rendered

    with ThreadPoolExecutor(max_workers=5) as executor:
        futures = [executor.submit(render, i) for i in range(4)]
        executor.submit(reload_phrases).result()
        total = sum(f.result() for f in futures)

    print(f"Rendered {total} translations during 100 reloads")
    print(t.translate("status", 3))


if __name__ == "__main__":
    main()
