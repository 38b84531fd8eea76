"""The package contains the forms related to virtual hosts."""

from brokerconsole.virtualhost.loader import TypeSpecificFormLoader, build_store_type_lookup

__all__ = ('TypeSpecificFormLoader', 'build_store_type_lookup')
