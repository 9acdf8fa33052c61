"""Pydantic schemas for the PMS API."""

from pms.schemas.agreement import *
from pms.schemas.application import *
from pms.schemas.auth import *
from pms.schemas.dashboard import *
from pms.schemas.maintenance import *
from pms.schemas.notification import *
from pms.schemas.payment import *
from pms.schemas.property import *
