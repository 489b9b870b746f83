"""hexagen -- scaffolds hexagonal-layout Go HTTP services.

Run ``hexagen -h`` for the command-line interface, or drive the scaffolder
directly::

    from hexagen.config import GenerationConfig
    from hexagen.scaffolder import materialize

    result = materialize(GenerationConfig(root="./svc", module_name="github.com/acme/svc"))
"""

__version__ = "1.0.0"
