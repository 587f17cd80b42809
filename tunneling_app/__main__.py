from __future__ import annotations

import logging
import sys
from pathlib import Path

from tunneling_app.orchestration.session import init_session
from tunneling_app.reports.summary import summary_markdown


def main() -> None:
    """
    CLI entry.

    Keep this minimal: we do not import Streamlit here to avoid import-time
    side effects during packaging. Print a friendly hint and the default state.
    """
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    repo_root = Path(__file__).resolve().parent.parent
    ui_script = repo_root / "ui_streamlit" / "app.py"
    session = init_session()
    msg = (
        "Quantum Tunneling Lab — rectangular barrier\n"
        f"Project root: {repo_root}\n"
        f"Run the app with:\n\n"
        f"    streamlit run {ui_script}\n\n"
        f"{summary_markdown(session.config.params, session.coeffs)}"
    )
    sys.stdout.write(msg)


if __name__ == "__main__":
    main()
