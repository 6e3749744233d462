"""
Serialisation of filter specifications and preset bundles.

    ocean_filters.metadata_io.io              export/import entry points
    ocean_filters.metadata_io.metadata_model  document shapes
"""
