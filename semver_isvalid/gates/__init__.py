"""The individual checks that make up the version pipeline.

Each module in this package contains one or more classes that inherit from
`semver_isvalid.core.base_gate.BaseGate`. The order in which they run is
fixed by `semver_isvalid.core.validator.GATES`.
"""
from .core_segments import CoreSegmentGate
from .empty import EmptyStringGate
from .metadata import BuildMetadataGate
from .numeric import NumericParseGate
from .prerelease import PreReleaseGate
from .segments import SegmentCountGate, SuffixExtractionGate
