"""YAML configuration loading and validation.

This module handles loading and saving export configuration from YAML files.
A configuration names where material markup comes from (a directory or an
explicit list of named files) and how the output JSON is written.
"""

import os
from typing import Any, Dict, List

import yaml

from .errors import ConfigError, FilesystemError
from .models import ExportConfig, ManifestEntry


class ConfigLoader:
    """Handles configuration file loading, validation, and saving.

    Configuration file structure:
        source_dir: "./materials"
        pattern: "*.xml"
        output: "materials.json"
        indent: 2
        ensure_ascii: false

    or, with an explicit manifest instead of source_dir:
        materials:
          - name: "Brushed steel"
            path: "steel.xml"
        output: "materials.json"
    """

    DEFAULT_CONFIG_PATH = ".material-export.yaml"

    KNOWN_FIELDS = {'source_dir', 'pattern', 'materials', 'output', 'indent', 'ensure_ascii'}

    # Default values for optional fields
    DEFAULTS = {
        'pattern': '*.xml',
        'output': 'materials.json',
        'indent': 2,
        'ensure_ascii': False,
    }

    @classmethod
    def load(cls, config_path: str) -> ExportConfig:
        """Load and parse configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            ExportConfig object with parsed configuration

        Raises:
            FilesystemError: If file cannot be read
            ConfigError: If configuration is invalid or malformed
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise FilesystemError(
                config_path,
                'read',
                'Configuration file not found'
            )
        except PermissionError:
            raise FilesystemError(
                config_path,
                'read',
                'Permission denied'
            )
        except OSError as e:
            raise FilesystemError(
                config_path,
                'read',
                str(e)
            )

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML syntax: {str(e)}"
            )

        if config_dict is None:
            raise ConfigError("Configuration file is empty")

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls._parse_config(config_dict)

    @classmethod
    def save(cls, config_path: str, export_config: ExportConfig) -> None:
        """Save configuration to a YAML file.

        Args:
            config_path: Path to the YAML configuration file
            export_config: ExportConfig object to save

        Raises:
            FilesystemError: If file cannot be written
        """
        config_dict: Dict[str, Any] = {}
        if export_config.source_dir is not None:
            config_dict['source_dir'] = export_config.source_dir
            config_dict['pattern'] = export_config.pattern
        else:
            config_dict['materials'] = [
                {'name': entry.name, 'path': entry.path}
                for entry in export_config.materials
            ]
        config_dict['output'] = export_config.output
        config_dict['indent'] = export_config.indent
        config_dict['ensure_ascii'] = export_config.ensure_ascii

        yaml_str = yaml.safe_dump(
            config_dict,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False
        )

        config_dir = os.path.dirname(config_path)
        if config_dir:
            try:
                os.makedirs(config_dir, exist_ok=True)
            except OSError as e:
                raise FilesystemError(
                    config_dir,
                    'create_directory',
                    str(e)
                )

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                f.write(yaml_str)
        except PermissionError:
            raise FilesystemError(
                config_path,
                'write',
                'Permission denied'
            )
        except OSError as e:
            raise FilesystemError(
                config_path,
                'write',
                str(e)
            )

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> ExportConfig:
        """Parse and validate configuration dictionary.

        Args:
            config_dict: Raw configuration dictionary from YAML

        Returns:
            Validated ExportConfig object

        Raises:
            ConfigError: If configuration is invalid
        """
        unknown_fields = set(config_dict.keys()) - cls.KNOWN_FIELDS
        if unknown_fields:
            raise ConfigError(
                f"Unknown fields: {', '.join(sorted(str(f) for f in unknown_fields))}"
            )

        has_source_dir = config_dict.get('source_dir') is not None
        has_materials = config_dict.get('materials') is not None

        if has_source_dir and has_materials:
            raise ConfigError(
                "Fields 'source_dir' and 'materials' are mutually exclusive"
            )
        if not has_source_dir and not has_materials:
            raise ConfigError(
                "One of 'source_dir' or 'materials' is required"
            )

        source_dir = None
        if has_source_dir:
            source_dir = str(config_dict['source_dir'])
            if not source_dir.strip():
                raise ConfigError(
                    "Field 'source_dir' cannot be empty",
                    'source_dir'
                )

        materials: List[ManifestEntry] = []
        if has_materials:
            materials = cls._parse_materials(config_dict['materials'])

        pattern = config_dict.get('pattern', cls.DEFAULTS['pattern'])
        output = config_dict.get('output', cls.DEFAULTS['output'])
        indent = config_dict.get('indent', cls.DEFAULTS['indent'])
        ensure_ascii = config_dict.get('ensure_ascii', cls.DEFAULTS['ensure_ascii'])

        # bool is an int subclass; reject it explicitly for indent
        if isinstance(indent, bool) or not isinstance(indent, int):
            raise ConfigError(
                f"Field 'indent' must be an integer, got {type(indent).__name__}",
                'indent'
            )
        if indent < 0:
            raise ConfigError(
                f"Field 'indent' must be at least 0, got {indent}",
                'indent'
            )
        if not isinstance(ensure_ascii, bool):
            raise ConfigError(
                f"Field 'ensure_ascii' must be a boolean, got {type(ensure_ascii).__name__}",
                'ensure_ascii'
            )

        pattern = str(pattern)
        output = str(output)
        if not pattern.strip():
            raise ConfigError("Field 'pattern' cannot be empty", 'pattern')
        if not output.strip():
            raise ConfigError("Field 'output' cannot be empty", 'output')

        return ExportConfig(
            source_dir=source_dir,
            pattern=pattern,
            materials=materials,
            output=output,
            indent=indent,
            ensure_ascii=ensure_ascii,
        )

    @classmethod
    def _parse_materials(cls, materials_raw: Any) -> List[ManifestEntry]:
        if not isinstance(materials_raw, list):
            raise ConfigError(
                "Field 'materials' must be a list",
                'materials'
            )

        entries = []
        for i, entry in enumerate(materials_raw):
            if not isinstance(entry, dict):
                raise ConfigError(
                    f"Material entry at index {i} must be a dictionary",
                    f'materials[{i}]'
                )
            if 'path' not in entry or entry['path'] is None:
                raise ConfigError(
                    f"Missing required field 'path' in material {i}",
                    f'materials[{i}].path'
                )

            path = str(entry['path'])
            if not path.strip():
                raise ConfigError(
                    f"Field 'path' in material {i} cannot be empty",
                    f'materials[{i}].path'
                )

            # Names need not be unique or non-empty; default to the file stem
            name = entry.get('name')
            if name is None:
                name = os.path.splitext(os.path.basename(path))[0]

            entries.append(ManifestEntry(name=str(name), path=path))

        return entries
