from .RemotePath import RemotePath, PATH_SEPARATOR
from .Utils import IsValidPath, EncodePath, ParseTimeout
from .dav import DavConnection, DavMethod, MoveMethod, PropFindMethod, WEBDAV_PATH
from .operations import *
