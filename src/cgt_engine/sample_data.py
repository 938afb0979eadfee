"""
Sample data for demonstrating the CGT engine.

Rows follow the layout of the E*Trade G&L_Expanded sheet, including its
leading summary row, for a single 2023 fiscal year.
"""

from typing import Any

SAMPLE_HEADER = [
    "Record Type",
    "Symbol",
    "Plan Type",
    "Quantity",
    "Date Acquired",
    "Date Sold",
    "Total Proceeds",
    "Adjusted Cost Basis",
    "Adjusted Gain/Loss",
]


def create_sample_rows() -> list[list[Any]]:
    """
    Create sample G&L rows: five sales spread over both CGT payment periods.

    Sale dates are ECB business days so every row has a published rate.
    """
    return [
        ["Summary", None, None, 197.0, None, None, 12308.50, 10035.00, 2273.50],
        # Jan - Nov
        ["Sell", "XYZ", "RS", 100.0, "05/17/2021", "03/01/2023", 5000.00, 4000.00, 1000.00],
        ["Sell", "XYZ", "ESPP", 20.0, "11/26/2021", "03/01/2023", 800.00, 1000.00, -200.00],
        ["Sell", "XYZ", "RS", 30.0, "08/16/2022", "06/15/2023", 1950.00, 1560.00, 390.00],
        ["Sell", "XYZ", "ESPP", 15.0, "05/27/2022", "11/30/2023", 1158.50, 1075.00, 83.50],
        # December
        ["Sell", "XYZ", "RS", 32.0, "11/15/2022", "12/05/2023", 3400.00, 2400.00, 1000.00],
    ]
