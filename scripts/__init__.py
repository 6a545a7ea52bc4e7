"""Package marker so the helper scripts import under a single module name."""
