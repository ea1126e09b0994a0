"""
closeio_client.pipeline

Building blocks of the shared request pipeline.

Responsibilities:
- Per-call options and merge precedence (`options`).
- Body encoding/decoding (`body`).
- Status-to-result mapping (`results`).
- httpx client and URL/header helpers (`transport`).
"""

# Package marker.
