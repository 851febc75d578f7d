#!/usr/bin/env python3
"""Example: initiator side of an RLPx auth message (signature + ECIES)."""

from rlpxcrypto import (auth_signature, make_nonce, privkey_to_node_id,
                        random_privkey, seal_auth_message)

static_privkey = random_privkey()
remote_privkey = random_privkey()
remote_node_id = privkey_to_node_id(remote_privkey)
print("Remote node id:", remote_node_id.hex()[:32] + "...")

eph_privkey = random_privkey()
nonce = make_nonce()
sig = auth_signature(static_privkey, remote_node_id, nonce, eph_privkey)
print("Auth signature (65 bytes):", sig.hex()[:32] + "...")

# Stand-in for the RLP-encoded [sig, initiator-pubk, initiator-nonce, auth-vsn]
body = sig + privkey_to_node_id(static_privkey) + nonce + b"\x04"
sealed = seal_auth_message(body, b"\x04" + remote_node_id)
print("Sealed auth message:", len(sealed), "bytes, size prefix", sealed[:2].hex())
