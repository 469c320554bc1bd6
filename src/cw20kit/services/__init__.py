"""Service layer — operations over the message contract.

Every public operation returns a :class:`~cw20kit.services.result.ServiceResult`.
"""
