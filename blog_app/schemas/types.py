from datetime import datetime
from typing import Annotated

from pydantic import PlainSerializer

from blog_app.timeutils import isoformat_utc

# Stored naive UTC datetimes go out as ISO-8601 with a Z suffix,
# otherwise JavaScript's Date() reads them as local time.
UTCDateTime = Annotated[datetime, PlainSerializer(isoformat_utc, return_type=str, when_used="json")]
