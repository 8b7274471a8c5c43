"""Unit tests for path helper functions."""

from pathlib import Path

from deploy_config.paths import get_config_paths, get_default_config_dir, get_default_env_file


class TestGetDefaultConfigDir:
    """Test the get_default_config_dir function."""

    def test_returns_current_directory(self, tmp_path: Path, monkeypatch):
        """Test that default config dir is the working directory."""
        monkeypatch.chdir(tmp_path)

        assert get_default_config_dir() == Path.cwd()

    def test_returns_absolute_path(self):
        """Test that returned path is absolute."""
        assert get_default_config_dir().is_absolute()


class TestGetDefaultEnvFile:
    """Test the get_default_env_file function."""

    def test_dotenv_in_config_dir(self, tmp_path: Path, monkeypatch):
        """Test that the default dotenv file is ./.env."""
        monkeypatch.chdir(tmp_path)

        env_file = get_default_env_file()

        assert env_file.name == ".env"
        assert env_file.parent == Path.cwd()


class TestGetConfigPaths:
    """Test the get_config_paths function."""

    def test_returns_tuple_of_two_paths(self):
        """Test that function returns a tuple of two Path objects."""
        result = get_config_paths()

        assert isinstance(result, tuple)
        assert len(result) == 2
        assert isinstance(result[0], Path)
        assert isinstance(result[1], Path)

    def test_default_filenames(self):
        """Test that default filenames are correct."""
        networks_path, env_path = get_config_paths()

        assert networks_path.name == "networks.json"
        assert env_path.name == ".env"

    def test_custom_config_root(self, tmp_path: Path):
        """Test using a custom config root directory."""
        custom_root = tmp_path / "project"
        networks_path, env_path = get_config_paths(config_root=custom_root)

        assert networks_path.parent == custom_root
        assert env_path.parent == custom_root

    def test_custom_config_root_as_string(self, tmp_path: Path):
        """Test that custom config root can be provided as string."""
        custom_root = str(tmp_path / "string_root")
        networks_path, env_path = get_config_paths(config_root=custom_root)

        assert networks_path.parent == Path(custom_root)
        assert env_path.parent == Path(custom_root)

    def test_relative_custom_root_converted_to_absolute(self, tmp_path: Path, monkeypatch):
        """Test that relative custom root is converted to absolute path."""
        monkeypatch.chdir(tmp_path)

        networks_path, env_path = get_config_paths(config_root="relative_root")

        assert networks_path.is_absolute()
        assert env_path.is_absolute()
