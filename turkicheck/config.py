#!/usr/bin/env python3
"""
Configuration Management
========================
Loads startup settings from a .env file and the process environment,
falling back to configs/app.yaml.

The forbidden-cluster lists are read here once and handed to the rule
set as an explicit value; the engine never reads the environment.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Tuple

from turkicheck.settings import get_setting
from turkicheck.rules import ForbiddenClusters, normalize_clusters


ENV_CLUSTERS_CYRILLIC = 'FORBIDDEN_CLUSTERS_CYRILLIC'
ENV_CLUSTERS_LATIN = 'FORBIDDEN_CLUSTERS_LATIN'
ENV_OUTPUT_DIR = 'TURKICHECK_OUTPUT_DIR'
ENV_DUPLICATE_POLICY = 'TURKICHECK_DUPLICATE_POLICY'


@dataclass
class Config:
    """Application configuration"""
    forbidden_clusters_cyrillic: Tuple[str, ...] = ()
    forbidden_clusters_latin: Tuple[str, ...] = ()
    output_dir: str = 'output'
    correct_file: str = 'correct.json'
    incorrect_file: str = 'incorrect.json'
    indent: int = 4
    duplicate_policy: str = 'overwrite'
    ingestion_pattern: str = '*.json'
    env: dict = field(default_factory=dict, repr=False)

    @property
    def forbidden_clusters(self) -> ForbiddenClusters:
        return ForbiddenClusters(
            cyrillic=normalize_clusters(self.forbidden_clusters_cyrillic),
            latin=normalize_clusters(self.forbidden_clusters_latin),
        )


def load_env(env_path: Path = None) -> dict:
    """Load environment variables from .env file."""
    if env_path is None:
        env_path = Path.cwd() / '.env'

    env_vars = {}
    if env_path.exists():
        for line in env_path.read_text(encoding='utf-8').splitlines():
            line = line.strip()
            if '=' in line and not line.startswith('#'):
                key, value = line.split('=', 1)
                value = value.strip().strip('"').strip("'")
                env_vars[key.strip()] = value
                # Also set in os.environ for tools that read it directly
                os.environ.setdefault(key.strip(), value)

    return env_vars


def parse_cluster_list(value: Optional[str]) -> Tuple[str, ...]:
    """Split a comma-separated cluster list; empty or missing means none."""
    if not value:
        return ()
    return normalize_clusters(value.split(','))


def _lookup(env: dict, key: str) -> Optional[str]:
    value = env.get(key)
    if value is None:
        value = os.environ.get(key)
    return value


def get_config(env_path: Path = None) -> Config:
    """Get configuration from .env, the environment and app.yaml."""
    env = load_env(env_path)

    cyrillic = _lookup(env, ENV_CLUSTERS_CYRILLIC)
    latin = _lookup(env, ENV_CLUSTERS_LATIN)

    return Config(
        forbidden_clusters_cyrillic=(
            parse_cluster_list(cyrillic) if cyrillic is not None
            else normalize_clusters(get_setting('forbidden_clusters.cyrillic', []))
        ),
        forbidden_clusters_latin=(
            parse_cluster_list(latin) if latin is not None
            else normalize_clusters(get_setting('forbidden_clusters.latin', []))
        ),
        output_dir=_lookup(env, ENV_OUTPUT_DIR) or get_setting('output.directory', 'output'),
        correct_file=get_setting('output.correct_file', 'correct.json'),
        incorrect_file=get_setting('output.incorrect_file', 'incorrect.json'),
        indent=int(get_setting('output.indent', 4)),
        duplicate_policy=(
            _lookup(env, ENV_DUPLICATE_POLICY)
            or get_setting('aggregator.duplicate_policy', 'overwrite')
        ),
        ingestion_pattern=get_setting('ingestion.pattern', '*.json'),
        env=env,
    )


__all__ = [
    "Config",
    "get_config",
    "load_env",
    "parse_cluster_list",
    "ENV_CLUSTERS_CYRILLIC",
    "ENV_CLUSTERS_LATIN",
]
