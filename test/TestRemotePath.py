from StandardTestFixture import StandardTestFixture

from libdavmover import RemotePath, IsValidPath, EncodePath, ParseTimeout


class TestRemotePath(StandardTestFixture):

    def test_folder_gets_separator(this):
        this.assert_equal(RemotePath("/docs", True), "/docs/")
        this.assert_equal(RemotePath("/docs/", True), "/docs/")
        this.assert_equal(RemotePath("", True), "/")

    def test_folder_normalization_is_idempotent(this):
        for path in ["/", "/a", "/a/", "/a/b", "a//", "/with space/"]:
            once = RemotePath.Normalize(path, True)
            this.assert_equal(RemotePath.Normalize(once, True), once, path)

    def test_file_strips_exactly_one_separator(this):
        this.assert_equal(RemotePath("/docs/report.txt", False), "/docs/report.txt")
        this.assert_equal(RemotePath("/docs/report.txt/", False), "/docs/report.txt")
        this.assert_equal(RemotePath("/docs/report.txt//", False), "/docs/report.txt/")
        this.assert_equal(RemotePath("/", False), "")

    def test_is_normalized_once(this):
        path = RemotePath("/a//", False)
        this.assert_equal(path, "/a/")
        assert RemotePath(path, False) is path

    def test_kind(this):
        assert RemotePath("/a", True).IsFolder()
        assert not RemotePath("/a", False).IsFolder()

    def test_parent(this):
        this.assert_equal(RemotePath("/docs/report.txt").GetParent(), "/docs/")
        this.assert_equal(RemotePath("/docs/old/", True).GetParent(), "/docs/")
        this.assert_equal(RemotePath("/report.txt").GetParent(), "/")
        this.assert_equal(RemotePath("/", True).GetParent(), "/")
        assert RemotePath("/docs/report.txt").GetParent().IsFolder()

    def test_name(this):
        this.assert_equal(RemotePath("/docs/report.txt").GetName(), "report.txt")
        this.assert_equal(RemotePath("/docs/old/", True).GetName(), "old")

    def test_prefix(this):
        assert RemotePath("/a/", True).IsPrefixOf(RemotePath("/a/b/", True))
        assert RemotePath("/", True).IsPrefixOf(RemotePath("/a/", True))
        assert RemotePath("/file").IsPrefixOf(RemotePath("/file/file"))
        assert RemotePath("/a").IsPrefixOf(RemotePath("/ab"))
        assert not RemotePath("/a/", True).IsPrefixOf(RemotePath("/ab/", True))
        assert not RemotePath("/a/b/", True).IsPrefixOf(RemotePath("/a/", True))


class TestUtils(StandardTestFixture):

    def test_valid_path(this):
        assert IsValidPath("/docs/report final.txt")
        assert IsValidPath("/docs/")
        for c in '\\<>:"|?*':
            assert not IsValidPath(f"/docs/re{c}port.txt"), c

    def test_encode_path(this):
        this.assert_equal(EncodePath("/docs/my report.txt"), "/docs/my%20report.txt")
        this.assert_equal(EncodePath("/a/b/"), "/a/b/")
        this.assert_equal(EncodePath("/ü#%"), "/%C3%BC%23%25")

    def test_parse_timeout(this):
        this.assert_equal(ParseTimeout(10000), 10000)
        this.assert_equal(ParseTimeout("5000"), 5000)
        this.assert_raises(ValueError, ParseTimeout, 0)
        this.assert_raises(ValueError, ParseTimeout, -1)
        this.assert_raises(ValueError, ParseTimeout, "soon")
        this.assert_raises(ValueError, ParseTimeout, None)
        this.assert_raises(ValueError, ParseTimeout, float("inf"))
