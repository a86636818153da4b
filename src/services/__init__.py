"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities, ports, and external systems.

This layer contains:
- Header decoding (HeaderDecoder)
- Catalog indexing and region resolution (CatalogIndex, RegionResolver)
- Output naming (OutputNaming)
- Sorting orchestration (SorterService)

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
