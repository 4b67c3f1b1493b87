"""ChartDeck — spreadsheet rows to render-ready Chart.js descriptors."""

__version__ = "1.0.0"
