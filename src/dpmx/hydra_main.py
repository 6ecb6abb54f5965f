import hydra
from omegaconf import DictConfig
from .run import main_fit
from .evaluate import main_eval

@hydra.main(config_path="conf", config_name="defaults", version_base="1.3")
def main(cfg: DictConfig):
    mode = cfg.get("mode", "fit")
    if mode == "fit":
        main_fit(cfg)
    elif mode == "eval":
        main_eval(cfg)
    else:
        raise ValueError(f"Unknown mode {mode}")

if __name__ == "__main__":
    main()
