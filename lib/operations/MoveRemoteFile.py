"""
Move Remote Operation
---------------------

Purpose:
	Moves (or renames) a remote file or folder by sending a WebDAV MOVE request.

Role in Architecture:
	- Normalizes both paths once, when the operation is built.
	- Rejects moves that cannot succeed before touching the network where possible.
	- Executes the MOVE through the client and maps the answer to a RemoteOperationResult.

Interface:
	- Expected input parameters:
		* src_remote_path: The remote path of the file or folder to move.
		* dst_remote_path: The remote path it should have afterwards.
		* is_folder: Whether both paths name folders.
		* read_timeout, connection_timeout: Milliseconds; default to MOVE_READ_TIMEOUT and MOVE_CONNECTION_TIMEOUT.
	- Returns: A RemoteOperationResult. Never raises.

	Checks, in order (the first match wins):
		1. Invalid characters in the destination -> INVALID_CHARACTER_IN_NAME
		2. Source equals destination -> OK, nothing is sent
		3. Something already exists at the destination -> INVALID_OVERWRITE
		4. Source is a string prefix of the destination -> INVALID_DESTINATION_FILE

TODO/FIXMEs:
	None.
"""

from ..RemotePath import RemotePath
from ..Utils import IsValidPath
from ..dav.DavMethod import MoveMethod
from .RemoteOperation import RemoteOperation
from .RemoteOperationResult import RemoteOperationResult, ResultCode

MOVE_READ_TIMEOUT = 10000 # ms
MOVE_CONNECTION_TIMEOUT = 5000 # ms

class MoveRemoteFile(RemoteOperation):
	def __init__(this, src_remote_path, dst_remote_path, is_folder, read_timeout=None, connection_timeout=None, name="MoveRemoteFile"):
		super().__init__(name, read_timeout=read_timeout, connection_timeout=connection_timeout)

		this.arg.kw.optional["read_timeout"] = MOVE_READ_TIMEOUT
		this.arg.kw.optional["connection_timeout"] = MOVE_CONNECTION_TIMEOUT

		this.is_folder = bool(is_folder)
		this.src_remote_path = RemotePath(src_remote_path, this.is_folder)
		this.dst_remote_path = RemotePath(dst_remote_path, this.is_folder)

	def Describe(this):
		return f"Move {this.src_remote_path} to {this.dst_remote_path}"

	def Run(this, client):
		return this.RunNoLog(client, this.read_timeout, this.connection_timeout)

	# Raises on transport failures; Execute is the boundary that converts them.
	def RunNoLog(this, client, read_timeout, connection_timeout):
		if not IsValidPath(this.dst_remote_path):
			return RemoteOperationResult.FromCode(ResultCode.INVALID_CHARACTER_IN_NAME)

		if this.src_remote_path == this.dst_remote_path:
			return RemoteOperationResult.FromCode(ResultCode.OK)

		# check if a file with the new name already exists
		if client.exists_file(this.dst_remote_path):
			return RemoteOperationResult.FromCode(ResultCode.INVALID_OVERWRITE)

		if this.src_remote_path.IsPrefixOf(this.dst_remote_path):
			return RemoteOperationResult.FromCode(ResultCode.INVALID_DESTINATION_FILE)

		move = MoveMethod(client.url(this.src_remote_path), client.url(this.dst_remote_path))
		try:
			status = client.execute_method(move, read_timeout, connection_timeout)
			move.get_response_body() # exhaust response, although not interesting
			return RemoteOperationResult.FromResponse(move.is_success(status), status, move.get_response_headers())
		finally:
			move.release_connection()
