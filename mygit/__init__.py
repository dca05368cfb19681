"""Objects, index, refs, config, ignore rules and line diffs of a small content-addressed version control system."""

__version__ = "0.1.0"