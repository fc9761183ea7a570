import yaml
import argparse
from datetime import datetime
import os
import sys
import logging
from harness.logger import get_logger
from harness.runner import VectorRunner, summarize
from harness.vectors import load_vectors


def load_config(config_file):
    with open(config_file, 'r') as file:
        config = yaml.safe_load(file) or {}
    # Vector paths are relative to the config file
    vectors = config.get('vectors', 'vectors.yaml')
    if not os.path.isabs(vectors):
        config['vectors'] = os.path.join(os.path.dirname(os.path.abspath(config_file)), vectors)
    return config


def run_vectors(config):
    log_level = config.get('log_level', 'INFO')
    logger = get_logger("VectorRun", getattr(logging, log_level))
    logger.info(f"Running vectors from {config['vectors']} with configuration:")
    logger.info(config)

    cases = load_vectors(config['vectors'])
    runner = VectorRunner(tolerance=config.get('tolerance', 0.001), log_level=log_level)
    results = runner.run(cases)
    summary = summarize(results)

    logger.info(f"Completed {len(results)} cases, {int((~results['passed']).sum())} failed")
    return results, summary


def save_data(results, summary, config, timestamp):
    output_dir = config.get('output_dir', 'data')
    os.makedirs(output_dir, exist_ok=True)
    base_filename = config.get('output_filename', 'vector_results')

    # Save per-case results
    results_path = os.path.join(output_dir, f"{base_filename}_cases_{timestamp}.csv")
    results.to_csv(results_path, index=False)
    print(f"Case results saved to {results_path}")

    # Save per-function summary
    summary_path = os.path.join(output_dir, f"{base_filename}_summary_{timestamp}.csv")
    summary.to_csv(summary_path, index=False)
    print(f"Summary statistics saved to {summary_path}")
    return results_path, summary_path


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run 64.64 fixed-point test vectors from YAML config")
    parser.add_argument('config', help="Path to YAML configuration file")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    results, summary = run_vectors(config)
    print(summary.to_string(index=False))

    if config.get('save', True):
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        save_data(results, summary, config, timestamp)

    return 0 if results['passed'].all() else 1


if __name__ == "__main__":
    sys.exit(main())
