"""
Data loading & aggregation.

Modules:
  loader       : CSV → validated records (LoadResult with rejected rows).
  aggregations : Yearly popularity mean, subject counts, series registry.
  export       : Series serialization (CSV, XLSX).
"""
