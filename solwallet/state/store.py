"""
WalletStore — single owner of the AppState and coordinator of refresh chains.

Every operation is a fixed sequence of awaited steps (node calls, price
fetch) with no rollback: if a step raises, the exception propagates and
whatever was already applied stays applied. All directory mutations go
through dispatch(), which applies the transition, persists the state and
notifies subscribers.
"""

from __future__ import annotations

from typing import Callable

from solwallet.accounts import Account, WalletAccount, WatcherAccount
from solwallet.config import Settings, get_settings
from solwallet.price import PriceClient
from solwallet.rpc import SolanaRpcClient
from solwallet.state.actions import Action, reduce
from solwallet.state.app_state import AppState
from solwallet.state.persistence import JsonFilePersistor
from solwallet.wallet_logging import get_logger

logger = get_logger(__name__)

Subscriber = Callable[[AppState, Action], None]
ClientFactory = Callable[[str], SolanaRpcClient]


class WalletStore:
    def __init__(
        self,
        state: AppState,
        *,
        price_client: PriceClient,
        settings: Settings | None = None,
        default_url: str | None = None,
        persistor: JsonFilePersistor | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._state = state
        self._price_client = price_client
        self._persistor = persistor
        self._client_factory = client_factory or self._default_client
        self._subscribers: list[Subscriber] = []
        self.default_url = default_url or self.settings.rpc_url
        for account in state.accounts.values():
            self._bind_client(account)

    @property
    def state(self) -> AppState:
        return self._state

    def _default_client(self, url: str) -> SolanaRpcClient:
        return SolanaRpcClient(url, timeout=self.settings.rpc_timeout_sec)

    def _bind_client(self, account: Account) -> None:
        if account.client is None:
            account.client = self._client_factory(account.url)

    def _new_client(self, url: str) -> SolanaRpcClient:
        return self._client_factory(url)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register callback(state, action) for every dispatch; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def dispatch(self, action: Action) -> AppState:
        """Apply action, persist the resulting state, then notify subscribers."""
        self._state = reduce(self._state, action)
        if self._persistor is not None:
            self._persistor.save(self._state)
        for callback in list(self._subscribers):
            try:
                callback(self._state, action)
            except Exception as e:
                logger.exception("store_subscriber_failed", action=action.type.value, error=str(e))
        return self._state

    async def _finish_with_price_refresh(self) -> None:
        await self._state.load_sol_value(self._price_client)
        self.dispatch(Action.sol_value_refreshed())

    async def refresh_accounts(self) -> None:
        """Reload transactions and balance of every account, then the fiat price."""
        for account in list(self._state.accounts.values()):
            await account.load_transactions(limit=self.settings.transactions_limit)
            await account.refresh_balance()
        await self._finish_with_price_refresh()
        logger.info("store_accounts_refreshed", account_count=len(self._state.accounts))

    async def create_wallet(self, name: str, url: str | None = None) -> WalletAccount:
        """Generate a fresh wallet under name and add it to the directory."""
        url = url or self.default_url
        account = await WalletAccount.generate(name, url, client=self._new_client(url))
        self.dispatch(Action.add_account(account))
        await self._finish_with_price_refresh()
        logger.info("store_wallet_created", account_name=account.name, address=account.address)
        return account

    async def import_wallet(self, mnemonic: str, url: str | None = None) -> WalletAccount:
        """Import a seed phrase under the next free "Account N" name."""
        url = url or self.default_url
        account = await WalletAccount.from_mnemonic(
            self._state.generate_account_name(),
            url,
            mnemonic,
            client=self._new_client(url),
        )
        self.dispatch(Action.add_account(account))
        await self._finish_with_price_refresh()
        logger.info("store_wallet_imported", account_name=account.name, address=account.address)
        return account

    async def create_watcher(self, address: str, url: str | None = None) -> WatcherAccount:
        """Start watching address under the next free "Account N" name."""
        url = url or self.default_url
        account = WatcherAccount.watch(
            self._state.generate_account_name(),
            url,
            address,
            client=self._new_client(url),
        )
        await account.load_transactions(limit=self.settings.transactions_limit)
        self.dispatch(Action.add_account(account))
        await self._finish_with_price_refresh()
        logger.info("store_watcher_created", account_name=account.name, address=account.address)
        return account

    async def refresh_account(self, name: str) -> None:
        """Reload one account's transactions and balance; unknown names are ignored."""
        account = self._state.accounts.get(name)
        if account is None:
            logger.debug("store_refresh_unknown_account", account_name=name)
            return
        await account.load_transactions(limit=self.settings.transactions_limit)
        await account.refresh_balance()
        self.dispatch(Action.sol_value_refreshed())

    def remove_account(self, name: str) -> None:
        self.dispatch(Action.remove_account(name))
        logger.info("store_account_removed", account_name=name)

    def set_balance(self, name: str, balance: float) -> None:
        self.dispatch(Action.set_balance(name, balance))


async def create_store(
    settings: Settings | None = None,
    *,
    persistor: JsonFilePersistor | None = None,
    price_client: PriceClient | None = None,
    client_factory: ClientFactory | None = None,
    refresh: bool = True,
) -> WalletStore:
    """
    Restore the persisted state and build the store around it.

    With refresh=True every restored account is refreshed before returning.
    Wallet key pairs are not derived here; they are loaded on demand.
    """
    settings = settings or get_settings()
    if persistor is None:
        persistor = JsonFilePersistor(settings.state_path)
    if price_client is None:
        price_client = PriceClient(
            settings.price_api_url,
            asset=settings.price_asset_id,
            currency=settings.price_currency,
            api_key=settings.coingecko_api_key,
            timeout=settings.rpc_timeout_sec,
        )
    store = WalletStore(
        persistor.load(),
        price_client=price_client,
        settings=settings,
        persistor=persistor,
        client_factory=client_factory,
    )
    logger.info(
        "store_created",
        network=settings.network,
        account_count=len(store.state.accounts),
    )
    if refresh:
        await store.refresh_accounts()
    return store
