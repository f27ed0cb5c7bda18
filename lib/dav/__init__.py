from .DavMethod import DavMethod, MoveMethod, PropFindMethod
from .DavResponse import DavResponse
from .DavConnection import DavConnection, WEBDAV_PATH
