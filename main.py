import argparse
import json
import logging
import sys

import yaml

from workspace_ingestion.pipeline_orchestrator import PipelineOrchestrator

# --- Global settings ---
CONFIG_FILE = "config.yaml"


def load_config():
    """Loads the config file."""
    try:
        with open(CONFIG_FILE, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        logging.warning(f"Config file {CONFIG_FILE} not found. Using defaults.")
        return {}
    except yaml.YAMLError as e:
        logging.error(f"Failed to parse config file {CONFIG_FILE}: {e}")
        return {}


def parse_arguments(config):
    """
    Parses command-line arguments.

    Returns:
        argparse.Namespace: The parsed arguments.
    """
    parser = argparse.ArgumentParser(description="Dashboard workspace ingestion - command-line launcher")
    parser.add_argument(
        "--data-dir",
        type=str,
        default=config.get("data_dir", "data"),
        help="Directory holding the TSV exports."
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=config.get("log_dir", "logs"),
        help="Directory for the JSON log file."
    )
    parser.add_argument(
        "--log-name",
        type=str,
        default=config.get("log_name", "workspace_ingestion.log"),
        help="Name of the JSON log file."
    )
    parser.add_argument(
        "--output",
        type=str,
        default="",
        help="Write the workspaces as JSON to this file. Empty means stdout."
    )
    parser.add_argument(
        "--debug",
        action='store_true',
        help="Enable debug mode with verbose console logs and hardware usage reports."
    )
    return parser.parse_args()


def main():
    """
    Main entry point.
    """
    args = parse_arguments(load_config())

    orchestrator = PipelineOrchestrator(
        config_file_path=CONFIG_FILE,
        data_dir_override=args.data_dir,
        log_dir_override=args.log_dir,
        log_name_override=args.log_name,
        debug_mode=args.debug
    )
    workspaces = orchestrator.run()

    payload = json.dumps(workspaces, ensure_ascii=False, indent=2)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(payload)
        print(f"ℹ️ Wrote {len(workspaces)} workspace(s) to {args.output}")
    else:
        sys.stdout.write(payload + "\n")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    main()
