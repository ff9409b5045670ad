import fuelops.bootstrap_env  # must be first to set env/secrets
import logging
from datetime import datetime

import streamlit as st

from fuelops.config import APP_TITLE, TABS, configure_logging, load_assistant_settings
from fuelops.ui.layout import setup_page, sidebar_status
from fuelops.ui.pages import (
    assistant,
    dashboard,
    inventory,
    sales_log,
)
from fuelops.ui.pages.context import PageContext
from fuelops.ui.session import get_station_state, reset_station_state

logger = logging.getLogger(__name__)

PAGE_RENDERERS = {
    "dashboard": dashboard.render,
    "inventory": inventory.render,
    "sales": sales_log.render,
    "assistant": assistant.render,
}


def main() -> None:
    configure_logging()
    setup_page()
    st.title(APP_TITLE)

    settings = load_assistant_settings()
    state = get_station_state()

    if sidebar_status(state, settings):
        reset_station_state()
        st.toast("Session data reset to the mock station", icon="🔄")
        state = get_station_state()

    context = PageContext(
        state=state,
        settings=settings,
        now=datetime.now(),
    )

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            logger.warning("No renderer registered for tab %s", tab_config.key)
            continue
        with streamlit_tab:
            renderer(context)


if __name__ == "__main__":
    main()
