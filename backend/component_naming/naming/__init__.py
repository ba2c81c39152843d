"""
Component naming layer.

Renames the components of an application once per application lifetime and
records the original -> new mapping in the `app.oam.dev/component-mapping`
annotation:
- `RenameGuard` gates on the annotation
- `NameGenerator` derives new names from a `NamingPolicy`
- `MappingRecorder` encodes, writes and reads the mapping
- `ComponentRenamer` runs the pass
"""
