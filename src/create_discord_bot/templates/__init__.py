"""Bundled project template (``app/``) and its ``template.yaml``."""
