from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from record_browser.config.loader import load_global_config
from record_browser.services.data_source import data_source_from_config
from record_browser.services.export_service import ExportService
from record_browser.services.record_service import RecordService
from record_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from record_browser.ui.callbacks.callbacks_io import register_io_callbacks
from record_browser.ui.callbacks.callbacks_pagination import register_pagination_callbacks
from record_browser.ui.callbacks.callbacks_render import register_render_callbacks
from record_browser.ui.config import AppConfig
from record_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Initialize Service Layer (the dataset itself is fetched on first render)
    source = data_source_from_config(global_config)
    record_service = RecordService(source)
    export_service = ExportService(prefix=global_config.export_prefix)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        record_service=record_service,
        export_service=export_service,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_pagination_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "data_source": source.describe()},
    )
    return app
