"""Extract attribute values from LDIF streams as rows, CSV or JSON"""
__version__ = "1.0.0"

__title__ = "ldifget"
__description__ = "Extract attribute values from LDIF streams as rows, CSV or JSON"

__license__ = "MIT"
__author__ = "The ldifget developers"
__copyright__ = "Copyright (c) 2023-2026 {}".format(__author__)
