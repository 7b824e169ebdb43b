"""crudgen -- CRUD scaffolding for Symfony-style bundles.

Quick usage::

    from crudgen import CrudGenerator, EntityMetadata, Filesystem, TargetBundle

    generator = CrudGenerator(Filesystem(), skeleton_dir, "post", with_write=True)
    bundle = TargetBundle(path="src/Acme/BlogBundle", name="AcmeBlogBundle",
                          namespace="Acme\\BlogBundle")
    metadata = EntityMetadata(field_names=["id", "title"], identifier=["id"])
    result = generator.generate(bundle, "Post", metadata, "yml")
"""

from crudgen.scaffolder import (
    CrudGenerator,
    EntityMetadata,
    Filesystem,
    TargetBundle,
)

__version__ = "0.1.0"

__all__ = [
    "CrudGenerator",
    "EntityMetadata",
    "Filesystem",
    "TargetBundle",
    "__version__",
]
