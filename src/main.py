import argparse
import json
import sys
import os
from pathlib import Path

# Add project root to sys.path to allow imports from 'src'
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

def run_server(args) -> int:
    import uvicorn
    from src.common.config.manager import ConfigManager
    from src.common.logging import setup_logger
    from src.service.presentation.api import create_app

    config = ConfigManager(Path(args.config_dir)).load_backend_config(args.profile)
    logger = setup_logger("traffic_monitor", config.log_level)

    app = create_app(config)
    logger.info(f"Backend running on http://{config.server.host}:{config.server.port}")
    uvicorn.run(app, host=config.server.host, port=config.server.port)
    return 0

def run_estimate(args) -> int:
    from src.common.exceptions import InvalidInputError
    from src.common.schemas import EstimateResponse
    from src.estimation import estimate, parse_estimation_request

    payload = {
        "T_min": args.T_min,
        "Tff_min": args.Tff_min,
        "L_km": args.L_km,
        "qpc": args.qpc,
        "alpha": args.alpha,
        "beta": args.beta,
    }
    try:
        result = estimate(parse_estimation_request(payload))
    except InvalidInputError as e:
        print(json.dumps({"error": str(e)}))
        return 2
    except Exception as e:
        print(json.dumps({"error": str(e)}))
        return 1

    print(EstimateResponse.from_result(result).model_dump_json(exclude_none=True))
    return 0

def main(argv=None) -> int:
    """
    Main entry point for the traffic monitor backend.
    """
    parser = argparse.ArgumentParser(description="Traffic Monitor Backend")
    subparsers = parser.add_subparsers(dest="module", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP backend")
    serve.add_argument("--config-dir", default="conf")
    serve.add_argument("--profile", default="default")
    serve.set_defaults(func=run_server)

    est = subparsers.add_parser("estimate", help="Run the BPR estimator once")
    est.add_argument("--T_min", type=float, required=True, help="Observed travel time (min)")
    est.add_argument("--Tff_min", type=float, required=True, help="Free-flow travel time (min)")
    est.add_argument("--L_km", type=float, required=True, help="Link length (km)")
    est.add_argument("--qpc", type=float, required=True, help="Capacity flow (veh/h)")
    est.add_argument("--alpha", type=float, default=0.15)
    est.add_argument("--beta", type=float, default=4.0)
    est.set_defaults(func=run_estimate)

    args = parser.parse_args(argv)
    return args.func(args)

if __name__ == "__main__":
    sys.exit(main())
