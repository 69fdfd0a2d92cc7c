"""
Core utilities — shared exceptions and cross-cutting helpers used by the
account model, RPC client, price source and store.
"""
