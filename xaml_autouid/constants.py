# xaml_autouid/constants.py
"""
@file constants.py
@brief Namespace URIs, attribute names and layout constants shared by the pipeline.
"""

XAML_NAMESPACE = "http://schemas.microsoft.com/winfx/2006/xaml"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
DEFAULT_ALIAS = "x"

NAME_ATTRIBUTE = "Name"
UID_ATTRIBUTE = "Uid"
AUTOMATION_ID_ATTRIBUTE = "AutomationProperties.AutomationId"

QUALIFIED_NAME = f"{{{XAML_NAMESPACE}}}{NAME_ATTRIBUTE}"
QUALIFIED_UID = f"{{{XAML_NAMESPACE}}}{UID_ATTRIBUTE}"

MARKUP_EXTENSION = ".xaml"
INDENT_UNIT = "    "
BINDING_PREFIX = "{"

LOG_LEVEL_ENV = "XAML_AUTOUID_LOG_LEVEL"
