"""Services built on the table engine: shard gathering, export, summaries."""
