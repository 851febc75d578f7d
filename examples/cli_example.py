#!/usr/bin/env python3
"""Example: the JSON request interface, as used by `python -m rlpxcrypto`."""

import json

from rlpxcrypto import execute, parse_request, privkey_to_pubkey

privkey = bytes(31) + bytes([1])
remote_pubkey = privkey_to_pubkey(bytes([0x02]) * 32)

for request in (
    {"type": "Ecdhx", "privateKey": privkey.hex(), "publicKey": remote_pubkey.hex()},
    {"type": "EcdsaSign", "ephemeralPrivateKey": privkey.hex(), "msg": "42" * 32},
    {"type": "TaggedKdf", "remotePublicKey": remote_pubkey.hex(), "msg": "c0", "macData": "0072"},
):
    print(request["type"], "->", execute(parse_request(json.dumps(request))).hex()[:32] + "...")
