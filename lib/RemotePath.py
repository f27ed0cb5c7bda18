"""
lib/RemotePath.py

Purpose:
Implements a remote path class that normalizes server-relative paths according to the kind of object they name.

Place in Architecture:
Used by every remote operation to ensure that paths are handled in a uniform way before they are compared or sent to the server.
Folder paths always end with the path separator; file paths never do.

Interface:

	RemotePath(path, is_folder=False): Constructs a normalized remote path. Behaves like the str it wraps.
	Normalize(path, is_folder): Returns the normalized string without constructing a RemotePath.
	IsFolder(): Whether this path names a folder.
	GetParent(): Returns the parent folder path, ending with the separator.
	GetName(): Returns the leaf name.
	IsPrefixOf(other): Whether this path is a string prefix of other.

TODOs/FIXMEs:
None noted.
"""

import posixpath

PATH_SEPARATOR = "/"

class RemotePath(str):
	def __new__(cls, path="", is_folder=False):
		assert isinstance(path, str), path

		# A path is only ever normalized once.
		if (isinstance(path, RemotePath) and path.is_folder == is_folder):
			return path

		ret = super().__new__(cls, RemotePath.Normalize(path, is_folder))
		ret.is_folder = bool(is_folder)
		return ret

	@staticmethod
	def Normalize(path, is_folder):
		if (is_folder):
			if (path.endswith(PATH_SEPARATOR)):
				return str(path)
			return path + PATH_SEPARATOR

		if (path.endswith(PATH_SEPARATOR)):
			return path[:-1]
		return str(path)

	def IsFolder(this):
		return this.is_folder

	def GetParent(this):
		parent = posixpath.dirname(this.rstrip(PATH_SEPARATOR))
		if (not parent.endswith(PATH_SEPARATOR)):
			parent += PATH_SEPARATOR
		return RemotePath(parent, True)

	def GetName(this):
		return posixpath.basename(this.rstrip(PATH_SEPARATOR))

	# e.g. "/" -> "/a/" or "/file" -> "/file/file".
	# A plain string prefix: "/a" also claims "/ab".
	def IsPrefixOf(this, other):
		return str(other).startswith(this)
