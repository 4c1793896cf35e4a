"""Document parsing - attributes, includes, sections and the aggregate structure."""

from specscope.parser.attributes import (
    extract_attributes,
    extract_attributes_from_file,
    find_all_attribute_usages,
    find_attribute_usages,
    referenced_attribute_names,
    resolve_attributes,
)
from specscope.parser.files import read_file_content
from specscope.parser.includes import (
    build_include_tree,
    extract_includes,
    extract_includes_from_file,
    get_included_files,
    resolve_include_path,
    walk_include_tree,
)
from specscope.parser.models import (
    AttributeDefinition,
    AttributeUsage,
    IncludeInfo,
    IncludeNode,
    SectionInfo,
    SpecStructure,
)
from specscope.parser.sections import (
    extract_sections,
    extract_sections_from_file,
    get_section_content,
)
from specscope.parser.structure import build_structure

__all__ = [
    # Models
    "AttributeDefinition",
    "AttributeUsage",
    "IncludeInfo",
    "IncludeNode",
    "SectionInfo",
    "SpecStructure",
    # Attributes
    "extract_attributes",
    "extract_attributes_from_file",
    "find_all_attribute_usages",
    "find_attribute_usages",
    "referenced_attribute_names",
    "resolve_attributes",
    # Includes
    "build_include_tree",
    "extract_includes",
    "extract_includes_from_file",
    "get_included_files",
    "resolve_include_path",
    "walk_include_tree",
    # Sections
    "extract_sections",
    "extract_sections_from_file",
    "get_section_content",
    # Structure
    "build_structure",
    "read_file_content",
]
