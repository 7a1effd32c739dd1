"""Service layer — lending workflow returning ServiceResult.

Services may import from the domain layer only.
They reach storage and notification only through the ports in
:mod:`lendctl.services.ports`.
"""
