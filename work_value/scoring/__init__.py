"""
scoring/ — Work Value Engine

Modules:
    utils.py                  - Undefined-aware Decimal helpers
    coefficients.py           - Coefficient Resolver (level + quit-frequency tables)
    work_days.py              - Work-Day Counter
    economic_value.py         - Daily / hourly pay net of self-funded costs
    commute.py                - Commute Cost Model
    time_efficiency.py        - Time Investment Aggregator + Time Efficiency Factor
    environment.py            - Environment Factor
    lifetime.py               - Remaining-Lifetime Factor
    discomfort.py             - Discomfort Factor
    aggregator.py             - Final index + tier classification
    work_value_calculator.py  - Full pipeline facade
    narrative.py              - Result letter
"""
