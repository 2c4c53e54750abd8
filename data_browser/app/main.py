from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence, TextIO

import httpx

from data_browser.app.browser_session import BrowserSession
from data_browser.app.config import AppConfig
from data_browser.app.datasets import DATASETS, DatasetConfig, get_dataset
from data_browser.app.state import ViewState
from data_browser.app.ui.table_printer import print_table
from data_browser.clients.browser_sdk.collection_client import CollectionClient
from data_browser.clients.browser_sdk.http_client import HttpClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="data-browser", description="Browse one page of a remote collection.")
    parser.add_argument("dataset", choices=sorted(DATASETS))
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--page-size", type=int, default=None)
    parser.add_argument("--category", default=None, help="tab to browse, e.g. LAPTOPS for products")
    parser.add_argument(
        "--filter",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="substring filter on a filterable column; repeatable",
    )
    parser.add_argument("--env-file", default=".env")
    return parser


def parse_filters(raw_filters: Sequence[str]) -> dict[str, str]:
    filters: dict[str, str] = {}
    for raw in raw_filters:
        if "=" not in raw:
            raise ValueError(f"invalid filter {raw!r}; expected KEY=VALUE")
        key, value = raw.split("=", 1)
        filters[key.strip()] = value
    return filters


def initial_state(dataset: DatasetConfig, config: AppConfig, args: argparse.Namespace) -> ViewState:
    page_size = args.page_size if args.page_size is not None else config.default_page_size
    if page_size not in config.page_size_options:
        raise ValueError(f"--page-size must be one of {list(config.page_size_options)}")
    tab = args.category if args.category is not None else dataset.default_category
    return ViewState(page_size=page_size, current_page=max(1, args.page), category=dataset.category_for(tab))


async def run(
    args: argparse.Namespace,
    config: AppConfig,
    transport: httpx.AsyncBaseTransport | None = None,
    stream: TextIO | None = None,
) -> int:
    dataset = get_dataset(args.dataset)
    out = stream or sys.stdout
    client = httpx.AsyncClient(
        base_url=config.sdk.base_url,
        timeout=config.sdk.timeout_seconds,
        verify=config.sdk.verify_ssl,
        transport=transport,
    )
    http_client = HttpClient(config=config.sdk, client=client)
    try:
        session = BrowserSession(
            dataset,
            CollectionClient(http_client, dataset.collection, dataset.items_field),
            config=config,
            initial=initial_state(dataset, config, args),
        )
        for key, value in parse_filters(args.filter).items():
            session.set_filter(key, value)

        await session.load()
        state = session.state
        tab = session.active_tab
        title = f"{dataset.title} ({tab})" if tab else dataset.title
        print_table(
            title,
            session.visible_rows,
            list(dataset.columns),
            pager=session.pager,
            stream=out,
            empty_text=session.empty_message,
        )
        print(
            f"page {state.current_page}/{state.total_pages} | page_size {state.page_size} | total {state.total}"
            f" | showing {len(session.visible_rows)} of {len(state.items)} loaded",
            file=out,
        )
        if state.error:
            print(f"[error] {state.error}", file=out)
            return 1
        return 0
    finally:
        await http_client.aclose()


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = AppConfig.from_env(args.env_file)
        return asyncio.run(run(args, config))
    except ValueError as error:
        parser.error(str(error))
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
