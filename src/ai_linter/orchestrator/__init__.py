"""Execution layer for external CLI agents.

Turns a free-text-producing agent process into a structured call:
``backend`` spawns the process and unwraps its JSON envelope, ``retry``
repeats the call until the payload validates, and ``concurrency`` runs many
such calls under a fixed number of workers.
"""
