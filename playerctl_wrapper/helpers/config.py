# playerctl_wrapper/helpers/config.py
import os, yaml

CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "config", "playerctl.yaml")

DEFAULTS = {
    "binary": "playerctl",
    "player": None,
    "ignore_players": [],
}

def config_path() -> str:
    return os.environ.get("PLAYERCTL_CONFIG") or CONFIG_PATH

def load_config():
    """
    Read the playerctl section of the YAML config, filled in with DEFAULTS.
    A missing or broken file is reported and the defaults are used.
    """
    cfg = dict(DEFAULTS)
    path = config_path()
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        section = data.get("playerctl") or {}
        if not isinstance(section, dict):
            raise ValueError("'playerctl' section must be a mapping")
        cfg.update({k: v for k, v in section.items() if k in DEFAULTS})
    except (OSError, yaml.YAMLError, ValueError, AttributeError) as e:
        print(f"[config] {path} load error: {e}")

    # env wins over the file
    if os.environ.get("PLAYERCTL_BIN"):
        cfg["binary"] = os.environ["PLAYERCTL_BIN"]
    return cfg

def _names(value):
    if not value:
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)

def base_cmd(cfg=None):
    """
    playerctl argv prefix: the binary plus any --player / --ignore-player flags.
    """
    cfg = cfg if cfg is not None else load_config()
    cmd = [str(cfg.get("binary") or DEFAULTS["binary"])]
    player = _names(cfg.get("player"))
    if player:
        cmd.append(f"--player={player}")
    ignored = _names(cfg.get("ignore_players"))
    if ignored:
        cmd.append(f"--ignore-player={ignored}")
    return cmd
