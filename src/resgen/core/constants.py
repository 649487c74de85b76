#!/usr/bin/env python3
"""
Core constants used across resgen.

- Versioning: ordered product version names.
- Naming: index marker used in configuration paths, prefix markers.
- Defaults: values injected by default resolution.
- Labels/annotations: lineages that must carry the dedicated kinds, and the
  historical (product, resource) exceptions to that rule.
"""

import re
from typing import Final

# --- Versions --- #

# Product versions, oldest/most stable first
VERSION_ORDER: Final[tuple[str, ...]] = ("ga", "beta", "alpha", "private")

# --- Paths & naming --- #

# Separator between segments of a configuration path (e.g. "parent.0.child")
INDEX_MARKER: Final[str] = ".0."

# Prepended to root prefixes of resources with a nested query
NESTED_PREFIX: Final[str] = "Nested"

# Compiler target that never receives the nested prefix
CONVERSION_COMPILER: Final[str] = "terraformgoogleconversion-codegen"

# Leading components of a property namespace
PROPERTY_NS_HEAD: Final[str] = "Google"
PROPERTY_NS_TAIL: Final[str] = "Property"

# --- Defaults --- #

DEFAULT_UPDATE_VERB: Final[str] = "PUT"
DEFAULT_KEY_EXPANDER: Final[str] = "tpgresource.ExpandString"
NESTED_OBJECT_DESCRIPTION: Final[str] = "A nested object resource."
RESOURCE_REF_DESCRIPTION: Final[str] = "A reference to {resource} resource"

DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"

# --- Labels & annotations --- #

LABELS_LINEAGES: Final[frozenset[str]] = frozenset({"labels", "metadata.labels", "configuration.labels"})
ANNOTATIONS_LINEAGES: Final[frozenset[str]] = frozenset({"annotations", "metadata.annotations"})

# (product, resource) pairs allowed to keep a non-KeyValueLabels "labels" field
LABELS_EXCEPTIONS: Final[frozenset[tuple[str, str]]] = frozenset({
    ("CloudIdentity", "Group"),             # label values must be empty strings
    ("DeploymentManager", "Deployment"),    # labels is an Array
    ("Edgenetwork", "Network"),
    ("Edgenetwork", "Subnet"),
    ("Monitoring", "NotificationChannel"),  # userLabels holds the resource labels
    ("Monitoring", "MetricDescriptor"),     # labels is an Array
})

# (product, resource) pairs allowed to keep a non-KeyValueAnnotations "annotations" field
ANNOTATIONS_EXCEPTIONS: Final[frozenset[tuple[str, str]]] = frozenset({
    ("Gkeonprem", "BareMetalAdminClusterEnrollment"),  # annotations is output-only
})


# --- Regular Expressions --- #
# "HTTPServer" -> "HTTP_Server"
ACRONYM_BOUNDARY_RE: re.Pattern[str] = re.compile(r"([A-Z]+)([A-Z][a-z])")

# "fooBar" -> "foo_Bar"
CAMEL_BOUNDARY_RE: re.Pattern[str] = re.compile(r"([a-z\d])([A-Z])")

# Leading run of a term that gets capitalised by upper camelisation
CAMEL_HEAD_RE: re.Pattern[str] = re.compile(r"^[a-z\d]*")

# "_bar" or "/bar" segments folded into "Bar"
CAMEL_SEGMENT_RE: re.Pattern[str] = re.compile(r"(?:_|/)([a-z\d]*)")


# --- Runtime guard --- #
def validate_constants():
    """
    Ensure constants are valid at runtime.
    """
    if len(set(VERSION_ORDER)) != len(VERSION_ORDER):
        raise RuntimeError(f"VERSION_ORDER must not contain duplicates, got {VERSION_ORDER!r}")

validate_constants()
