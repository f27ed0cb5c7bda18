"""
Rename Remote Operation
-----------------------

Purpose:
	Renames a remote file or folder in place: the object keeps its parent folder and only its leaf name changes.

Role in Architecture:
	- Computes the new remote path from the old path and the new name.
	- Delegates the request itself to a MoveRemoteFile built for that path.
	- Renaming to the same name is a no-op and never reaches the server.

Interface:
	- Expected input parameters:
		* old_name: Current leaf name of the file or folder.
		* old_remote_path: Current remote path.
		* new_name: Leaf name to set.
		* is_folder: Whether the object is a folder.
		* read_timeout, connection_timeout: Milliseconds; default to RENAME_READ_TIMEOUT and RENAME_CONNECTION_TIMEOUT.
	- Returns: A RemoteOperationResult. Never raises.

TODO/FIXMEs:
	None.
"""

from ..RemotePath import RemotePath, PATH_SEPARATOR
from .MoveRemoteFile import MoveRemoteFile
from .RemoteOperation import RemoteOperation
from .RemoteOperationResult import RemoteOperationResult, ResultCode

RENAME_READ_TIMEOUT = 10000 # ms
RENAME_CONNECTION_TIMEOUT = 5000 # ms

class RenameRemoteFile(RemoteOperation):
	def __init__(this, old_name, old_remote_path, new_name, is_folder, read_timeout=None, connection_timeout=None, name="RenameRemoteFile"):
		super().__init__(name, read_timeout=read_timeout, connection_timeout=connection_timeout)

		this.arg.kw.optional["read_timeout"] = RENAME_READ_TIMEOUT
		this.arg.kw.optional["connection_timeout"] = RENAME_CONNECTION_TIMEOUT

		assert isinstance(old_name, str), old_name
		assert isinstance(old_remote_path, str), old_remote_path
		assert isinstance(new_name, str), new_name

		this.old_name = old_name
		this.old_remote_path = old_remote_path
		this.new_name = new_name
		this.is_folder = bool(is_folder)

		# Only known once Run has computed it.
		this.dst_remote_path = None
		this.move = None

	@staticmethod
	def GetNewRemotePath(old_remote_path, new_name, is_folder):
		path = RemotePath(old_remote_path, is_folder).GetParent() + new_name
		if is_folder:
			path += PATH_SEPARATOR
		return path

	# For log lines: the computed destination when there is one.
	def GetTarget(this):
		if this.dst_remote_path is None:
			return this.new_name
		return this.dst_remote_path

	def Describe(this):
		return f"Rename {this.old_remote_path} to {this.GetTarget()}"

	def Run(this, client):
		if this.new_name == this.old_name:
			return RemoteOperationResult.FromCode(ResultCode.OK)

		return this.RunNoLog(client)

	def RunNoLog(this, client):
		this.dst_remote_path = this.GetNewRemotePath(this.old_remote_path, this.new_name, this.is_folder)
		this.move = MoveRemoteFile(this.old_remote_path, this.dst_remote_path, this.is_folder)
		return this.move.RunNoLog(client, this.read_timeout, this.connection_timeout)
