# ghsync/runtime.py
"""
Wiring: builds the importer stack from a SyncConfig.

Usage:
    from ghsync.config import load_sync_config
    from ghsync.runtime import SyncRuntime

    with SyncRuntime.from_config(load_sync_config()) as runtime:
        print(runtime.importer.import_master())
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

import httpx

from ghsync.config.schema import SyncConfig
from ghsync.core.hooks import HookRegistry, register_config_filters
from ghsync.core.http import create_api_client
from ghsync.core.paths import SyncPaths
from ghsync.export.base import LogNotifier, Notifier
from ghsync.export.webhook import WebhookNotifier
from ghsync.importer.commit import CommitImporter
from ghsync.importer.payload import PayloadImporter
from ghsync.importer.processors import ProcessorRegistry
from ghsync.remote.github import GitHubFetcher
from ghsync.store.sqlite import SqliteContentStore


@dataclass
class SyncRuntime:
    """Everything one repository sync needs, owned together."""

    config: SyncConfig
    store: SqliteContentStore
    hooks: HookRegistry
    importer: PayloadImporter
    clients: List[httpx.Client]

    @classmethod
    def from_config(cls, config: SyncConfig, **client_kwargs: Any) -> "SyncRuntime":
        """
        Build the runtime.

        Args:
            config: Validated configuration.
            **client_kwargs: Passed to every httpx.Client (e.g. transport=).
        """
        store = SqliteContentStore(config.database or SyncPaths.database())

        hooks = HookRegistry()
        register_config_filters(hooks, config)

        github = create_api_client(
            config.api_url,
            api_key=config.token,
            timeout=config.timeout,
            **client_kwargs,
        )
        clients = [github]

        notifier: Notifier
        if config.notify_url:
            notify_client = create_api_client(config.notify_url, timeout=config.timeout, **client_kwargs)
            clients.append(notify_client)
            notifier = WebhookNotifier(notify_client, config.notify_url)
        else:
            notifier = LogNotifier()

        commits = CommitImporter(
            store=store,
            notifier=notifier,
            hooks=hooks,
            processors=ProcessorRegistry(hooks, config.markdown_extensions),
        )
        fetcher = GitHubFetcher(github, config.repository, branch=config.branch, state=store)

        return cls(
            config=config,
            store=store,
            hooks=hooks,
            importer=PayloadImporter(fetcher=fetcher, store=store, commits=commits),
            clients=clients,
        )

    def close(self) -> None:
        for client in self.clients:
            client.close()
        self.store.close()

    def __enter__(self) -> "SyncRuntime":
        return self

    def __exit__(self, *exc_info: Optional[Any]) -> None:
        self.close()


__all__ = ["SyncRuntime"]
