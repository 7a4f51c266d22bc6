"""The ``processor`` dependency bucket.

Holds the artifacts of annotation processors. Resolution is limited to
expanding file paths and glob patterns; no repository lookups happen here.
"""

BUCKET_NAME = "processor"
