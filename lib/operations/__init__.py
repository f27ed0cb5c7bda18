from .RemoteOperationResult import RemoteOperationResult, ResultCode
from .RemoteOperation import RemoteOperation
from .MoveRemoteFile import MoveRemoteFile, MOVE_READ_TIMEOUT, MOVE_CONNECTION_TIMEOUT
from .RenameRemoteFile import RenameRemoteFile, RENAME_READ_TIMEOUT, RENAME_CONNECTION_TIMEOUT
