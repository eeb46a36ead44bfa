"""
Part-Time Jobs Marketplace
A student / employer job marketplace prototype.

Architecture:
- Application shell: all state, role-aware screen routing
- Local JSON store: stands in for browser storage
- Backend and AI text generation: stubs with artificial latency
"""

__version__ = "1.0.0"
