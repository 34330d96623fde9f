"""
Resolved options and configuration handling for Complexity CLI.
"""

from dataclasses import dataclass
from typing import Optional

from complexity_cli.core.config import AnalyzerConfig, load_config_file
from complexity_cli.core.constants import OUTPUT_FORMATS
from complexity_cli.core.exceptions import ConfigurationError
from complexity_cli.core.logging import configure_logging, log_debug, log_info


@dataclass
class ResolvedOptions:
    """Container for resolved CLI options."""

    sentinel: str
    output_format: str
    show_reasons: bool
    show_banner: bool
    show_summary: bool
    max_code_width: int
    debug: bool
    config: AnalyzerConfig  # Include the full config object


def resolve_options(
    format_override: Optional[str] = None,
    sentinel_override: Optional[str] = None,
    config_override: Optional[str] = None,
    debug_override: bool = False,
    verbose_override: bool = False,
    log_file_override: Optional[str] = None,
    no_reasons_override: bool = False,
    no_summary_override: bool = False,
) -> ResolvedOptions:
    """Resolves options based on command args, config files, and defaults."""
    # Configure logging first
    configure_logging(
        debug=debug_override, verbose=verbose_override, log_file=log_file_override
    )

    log_debug("Starting option resolution")

    log_debug(f"Loading config file: {config_override or 'default locations'}")
    config_data = load_config_file(config_override)
    config = AnalyzerConfig.from_dict(config_data)
    log_debug(f"Loaded config: {config.to_dict()}")

    # Apply overrides
    if format_override:
        log_debug(f"Output format override: {format_override}")
        if format_override not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format '{format_override}'. "
                f"Expected one of: {', '.join(OUTPUT_FORMATS)}"
            )
        config.output_format = format_override

    if sentinel_override:
        log_debug(f"Sentinel override: {sentinel_override}")
        config.sentinel = sentinel_override

    if debug_override:
        config.debug = True
    elif config.debug:
        # Debug from the config file applies to logging as well
        configure_logging(
            debug=True, verbose=verbose_override, log_file=log_file_override
        )
        log_debug("Debug logging enabled by config file")

    # Command-line flags override config
    show_reasons = config.display.show_reasons and not no_reasons_override
    show_summary = config.display.show_summary and not no_summary_override

    resolved = ResolvedOptions(
        sentinel=config.sentinel,
        output_format=config.output_format,
        show_reasons=show_reasons,
        show_banner=config.display.show_banner,
        show_summary=show_summary,
        max_code_width=config.display.max_code_width,
        debug=config.debug,
        config=config,
    )

    log_info(
        f"Options resolved (format={resolved.output_format}, "
        f"sentinel={resolved.sentinel!r}, reasons={resolved.show_reasons})"
    )

    return resolved
