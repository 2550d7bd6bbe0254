"""Core building blocks: points, objectives, evaluators, meshes and the driver loop."""
