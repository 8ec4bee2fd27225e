"""
Services — the generation engine.

``config_parser`` reads the global config, ``emitter`` turns entries into
target declarations using the profiles in ``targets``, and
``tag_splicer`` places generated blocks inside a template.
"""
