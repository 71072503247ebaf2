"""Weather lookups composed as Result pipelines, served over HTTP and LINE."""

__version__ = "1.0.0"
