"""
Work Value Calculator

Turns a flat form record of lifestyle, salary, commute and workplace inputs
into a single work value index, a tier and a short narrative.

Sub-packages:
    core/      - exceptions
    models/    - enumerations, input snapshot, API models
    scoring/   - the valuation engine (pure functions + calculator facade)
    routers/   - FastAPI endpoints
"""

__version__ = "1.0.0"
