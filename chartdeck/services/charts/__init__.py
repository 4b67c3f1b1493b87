"""
Chart pipeline — types, ordering, palettes, assembly and lifecycle.

Modules:
  base        : ChartKind, AxisSelection, Series, ChartArtifact.
  comparator  : RowComparator (mixed-type, per-pair ordering).
  series      : SeriesBuilder (sorted label/value extraction).
  palette     : PaletteGenerator strategies.
  builder     : ChartSpecBuilder (policy-table assembly).
  lifecycle   : ChartLifecycleManager (one chart per target).

Import from the submodules directly.
"""
