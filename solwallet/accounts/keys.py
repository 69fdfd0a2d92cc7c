"""
Seed phrase handling and Solana key derivation.

Mnemonics are BIP-39 (English, 12 words for new wallets). Keys follow the
common Solana wallet path m/44'/501'/0'/0' and are returned as a solders
Keypair. Derivation is CPU-bound; callers on an event loop run it in an
executor (see WalletAccount.load_keypair).
"""

from __future__ import annotations

from bip_utils import (
    Bip39MnemonicGenerator,
    Bip39MnemonicValidator,
    Bip39SeedGenerator,
    Bip39WordsNum,
    Bip44,
    Bip44Changes,
    Bip44Coins,
)
from solders.keypair import Keypair

from solwallet.core.exceptions import InvalidMnemonicError

SOLANA_DERIVATION_PATH = "m/44'/501'/0'/0'"


def normalize_mnemonic(mnemonic: str) -> str:
    """Lowercase and collapse whitespace so pasted phrases validate."""
    return " ".join(mnemonic.lower().split())


def generate_mnemonic(words: Bip39WordsNum = Bip39WordsNum.WORDS_NUM_12) -> str:
    """Return a fresh random English BIP-39 mnemonic."""
    return Bip39MnemonicGenerator().FromWordsNumber(words).ToStr()


def is_valid_mnemonic(mnemonic: str) -> bool:
    """Return True if mnemonic passes BIP-39 word list and checksum validation."""
    if not isinstance(mnemonic, str) or not mnemonic.strip():
        return False
    return Bip39MnemonicValidator().IsValid(normalize_mnemonic(mnemonic))


def derive_keypair(mnemonic: str, account: int = 0) -> Keypair:
    """Derive the ed25519 signing key pair for mnemonic at m/44'/501'/<account>'/0'."""
    phrase = normalize_mnemonic(mnemonic)
    if not is_valid_mnemonic(phrase):
        raise InvalidMnemonicError("mnemonic failed BIP-39 validation")
    seed = Bip39SeedGenerator(phrase).Generate()
    node = (
        Bip44.FromSeed(seed, Bip44Coins.SOLANA)
        .Purpose()
        .Coin()
        .Account(account)
        .Change(Bip44Changes.CHAIN_EXT)
    )
    return Keypair.from_seed(node.PrivateKey().Raw().ToBytes())
