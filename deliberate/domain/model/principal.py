"""Principal: the authenticated actor behind a request.

Principals are resolved from a session issued by an external identity
provider. They are never persisted by this service.
"""

from deliberate.domain.model.common import DomainModel
from deliberate.domain.value import Email, UserId


class Principal(DomainModel):
    """Authenticated actor.

    ``is_admin`` is computed per request from the configured admin allow-list
    and travels with the principal, so access checks never consult global
    configuration.
    """

    id: UserId
    email: Email
    is_admin: bool = False
