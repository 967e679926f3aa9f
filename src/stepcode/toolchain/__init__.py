from .build_tool import StepListing, list_steps, run_build_tool

__all__ = ["StepListing", "list_steps", "run_build_tool"]
