#!/usr/bin/env python3
"""make_stock_chart.py
=================================

Entry-point script for the greeter and the candlestick chart renderer. The
heavy lifting lives in the ``stock_chart_module`` package.

Example usage
-------------

* Seed ``dtimelog.db`` and print ``Hello David``::

    python make_stock_chart.py greet

* Render the bundled MSFT sample to ``stock.svg``::

    python make_stock_chart.py plot

The script requires the following packages: ``pandas``, ``numpy``,
``matplotlib``, ``mplfinance`` and ``python-dateutil``.
"""
from __future__ import annotations

from stock_chart_module.cli import main


if __name__ == "__main__":
    main()
