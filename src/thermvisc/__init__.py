"""`thermvisc` - single-batch sensor reduction with a conductivity to viscosity lookup.

Subpackages:
- processing: Conditioning, reshaping, weighted reduction, lookup table, sources
- pipeline: Batch processor and orchestrator
- schemas: Pydantic configuration layers
- contracts: Fail-fast stage invariants
- cli: Command-line runner
"""

__version__ = "0.1.0"
