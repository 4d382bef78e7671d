"""Compiled-in typo table and canonical command list."""

from __future__ import annotations

from .models import TypoEntry

# Known typo -> correction pairs. Multi-word entries substitute as a phrase and
# keep any trailing arguments.
COMMON_FIXES: tuple[tuple[str, str], ...] = (
    # git
    ("gti", "git"),
    ("igt", "git"),
    ("gtt", "git"),
    ("got", "git"),
    ("gi", "git"),
    ("tig", "git"),
    ("gitt", "git"),
    ("git stauts", "git status"),
    ("git statsu", "git status"),
    ("git stats", "git status"),
    ("git stat", "git status"),
    ("git comit", "git commit"),
    ("git commti", "git commit"),
    ("git comimt", "git commit"),
    ("git cmomit", "git commit"),
    ("git psuh", "git push"),
    ("git puhs", "git push"),
    ("git pus", "git push"),
    ("git pul", "git pull"),
    ("git pull origin mian", "git pull origin main"),
    ("git push origin mian", "git push origin main"),
    ("git puul", "git pull"),
    ("git chekout", "git checkout"),
    ("git checkotu", "git checkout"),
    ("git chekcout", "git checkout"),
    ("git cehckout", "git checkout"),
    ("git brnach", "git branch"),
    ("git branhc", "git branch"),
    ("git barnch", "git branch"),
    ("git mereg", "git merge"),
    ("git merg", "git merge"),
    ("git ad", "git add"),
    ("git dd", "git add"),
    ("git lgo", "git log"),
    ("git lo", "git log"),
    ("git dif", "git diff"),
    ("git dfif", "git diff"),
    ("git fetc", "git fetch"),
    ("git fecth", "git fetch"),
    ("git clnoe", "git clone"),
    ("git clon", "git clone"),
    ("git rebsae", "git rebase"),
    ("git rebas", "git rebase"),
    ("git stsh", "git stash"),
    ("git stahs", "git stash"),
    ("git reste", "git reset"),
    ("git remtoe", "git remote"),
    ("git inti", "git init"),
    ("git tga", "git tag"),
    # npm / node
    ("nmp", "npm"),
    ("npn", "npm"),
    ("mpn", "npm"),
    ("npm onstall", "npm install"),
    ("npm isntall", "npm install"),
    ("npm instal", "npm install"),
    ("npm intall", "npm install"),
    ("npm insatll", "npm install"),
    ("npm unisntall", "npm uninstall"),
    ("npm uninstal", "npm uninstall"),
    ("npm strat", "npm start"),
    ("npm stat", "npm start"),
    ("npm tset", "npm test"),
    ("npm tets", "npm test"),
    ("npm rnu", "npm run"),
    ("npm ru", "npm run"),
    ("npm run biuld", "npm run build"),
    ("npm run buid", "npm run build"),
    ("npm run dve", "npm run dev"),
    ("npm updaet", "npm update"),
    ("npm publsh", "npm publish"),
    ("yran", "yarn"),
    ("yanr", "yarn"),
    ("yarn isntall", "yarn install"),
    ("yarn ad", "yarn add"),
    ("ndoe", "node"),
    ("noed", "node"),
    ("nod", "node"),
    ("npx craete-react-app", "npx create-react-app"),
    # python
    ("pyhton", "python"),
    ("pytohn", "python"),
    ("pyton", "python"),
    ("pthon", "python"),
    ("ptyhon", "python"),
    ("pyhton3", "python3"),
    ("pytohn3", "python3"),
    ("pyton3", "python3"),
    ("pip isntall", "pip install"),
    ("pip instal", "pip install"),
    ("pip intall", "pip install"),
    ("pip unisntall", "pip uninstall"),
    ("pip frezee", "pip freeze"),
    ("ipp", "pip"),
    ("pipi", "pip"),
    ("pip3 isntall", "pip3 install"),
    ("pip3 instal", "pip3 install"),
    # docker / kubernetes
    ("dokcer", "docker"),
    ("docekr", "docker"),
    ("dcoker", "docker"),
    ("doker", "docker"),
    ("dockr", "docker"),
    ("docker ps-a", "docker ps -a"),
    ("docker biuld", "docker build"),
    ("docker buidl", "docker build"),
    ("docker rnu", "docker run"),
    ("docker imgaes", "docker images"),
    ("docker iamges", "docker images"),
    ("docker exce", "docker exec"),
    ("docker pul", "docker pull"),
    ("docker psuh", "docker push"),
    ("docker-compsoe", "docker-compose"),
    ("docker-compoes", "docker-compose"),
    ("docker compsoe", "docker compose"),
    ("kubeclt", "kubectl"),
    ("kubctl", "kubectl"),
    ("kubetcl", "kubectl"),
    ("kuebctl", "kubectl"),
    ("kubectl gte", "kubectl get"),
    ("kubectl get pdos", "kubectl get pods"),
    ("kubectl get psod", "kubectl get pods"),
    ("kubectl aplly", "kubectl apply"),
    ("kubectl descirbe", "kubectl describe"),
    # shell builtins and coreutils
    ("sl", "ls"),
    ("l", "ls"),
    ("lls", "ls"),
    ("ls-la", "ls -la"),
    ("cd..", "cd .."),
    ("cd-", "cd -"),
    ("dc", "cd"),
    ("claer", "clear"),
    ("cler", "clear"),
    ("clera", "clear"),
    ("clar", "clear"),
    ("celar", "clear"),
    ("mkdri", "mkdir"),
    ("mkidr", "mkdir"),
    ("mdkir", "mkdir"),
    ("mkdr", "mkdir"),
    ("cta", "cat"),
    ("act", "cat"),
    ("grpe", "grep"),
    ("gerp", "grep"),
    ("ehco", "echo"),
    ("ecoh", "echo"),
    ("ehoc", "echo"),
    ("tocuh", "touch"),
    ("toch", "touch"),
    ("tuoch", "touch"),
    ("pdw", "pwd"),
    ("pwdd", "pwd"),
    ("whcih", "which"),
    ("whihc", "which"),
    ("mvv", "mv"),
    ("rmm", "rm"),
    ("rm -fr", "rm -rf"),
    ("chmdo", "chmod"),
    ("chomd", "chmod"),
    ("chwon", "chown"),
    ("chonw", "chown"),
    ("sudp", "sudo"),
    ("sduo", "sudo"),
    ("suod", "sudo"),
    ("sud", "sudo"),
    ("eixt", "exit"),
    ("exti", "exit"),
    ("exi", "exit"),
    ("histroy", "history"),
    ("hsitory", "history"),
    ("hisotry", "history"),
    ("tpo", "top"),
    ("hotp", "htop"),
    ("fidn", "find"),
    ("fnd", "find"),
    ("tial", "tail"),
    ("haed", "head"),
    ("lses", "less"),
    ("mroe", "more"),
    ("knill", "kill"),
    ("kilall", "killall"),
    ("tarr", "tar"),
    ("unizp", "unzip"),
    ("unzpi", "unzip"),
    ("wegt", "wget"),
    ("wgte", "wget"),
    ("crul", "curl"),
    ("culr", "curl"),
    ("shh", "ssh"),
    ("ssj", "ssh"),
    ("scpp", "scp"),
    ("pign", "ping"),
    ("ipng", "ping"),
    ("ifconfgi", "ifconfig"),
    ("sytemctl", "systemctl"),
    ("systemclt", "systemctl"),
    ("systemctl restrat", "systemctl restart"),
    ("systemctl statsu", "systemctl status"),
    ("serivce", "service"),
    ("servcie", "service"),
    # editors and package managers
    ("vmi", "vim"),
    ("ivm", "vim"),
    ("nivm", "nvim"),
    ("nnao", "nano"),
    ("naon", "nano"),
    ("cdoe", "code"),
    ("coed", "code"),
    ("apt-gte", "apt-get"),
    ("atp", "apt"),
    ("apt isntall", "apt install"),
    ("apt instal", "apt install"),
    ("apt udpate", "apt update"),
    ("apt updtae", "apt update"),
    ("apt upgarde", "apt upgrade"),
    ("sudo apt udpate", "sudo apt update"),
    ("sudo apt isntall", "sudo apt install"),
    ("bew", "brew"),
    ("berw", "brew"),
    ("brew isntall", "brew install"),
    ("brew instal", "brew install"),
    ("brwe", "brew"),
    ("pacmna", "pacman"),
    ("dfn", "dnf"),
    # build tools and languages
    ("mkae", "make"),
    ("maek", "make"),
    ("amke", "make"),
    ("cagro", "cargo"),
    ("carg", "cargo"),
    ("cargo biuld", "cargo build"),
    ("cargo rnu", "cargo run"),
    ("cargo tset", "cargo test"),
    ("og", "go"),
    ("go rnu", "go run"),
    ("go biuld", "go build"),
    ("rsutc", "rustc"),
    ("jaav", "java"),
    ("mvnn", "mvn"),
    ("gradel", "gradle"),
    ("terrafrom", "terraform"),
    ("terrafom", "terraform"),
    ("terraform pla", "terraform plan"),
    ("terraform aplly", "terraform apply"),
    ("ansibel", "ansible"),
)

# Known-good commands used as fuzzy targets
COMMON_COMMANDS: tuple[str, ...] = (
    # version control
    "git",
    "git status",
    "git commit",
    "git push",
    "git pull",
    "git checkout",
    "git branch",
    "git merge",
    "git rebase",
    "git stash",
    "git fetch",
    "git clone",
    "git diff",
    "git log",
    "svn",
    "hg",
    # javascript
    "npm",
    "npm install",
    "npm start",
    "npm test",
    "npm run",
    "npx",
    "yarn",
    "pnpm",
    "node",
    "deno",
    "bun",
    # python
    "python",
    "python3",
    "pip",
    "pip3",
    "pipenv",
    "poetry",
    "pytest",
    "conda",
    # containers
    "docker",
    "docker-compose",
    "kubectl",
    "helm",
    "podman",
    "minikube",
    # files and navigation
    "ls",
    "cd",
    "pwd",
    "mkdir",
    "rmdir",
    "rm",
    "cp",
    "mv",
    "touch",
    "cat",
    "less",
    "more",
    "head",
    "tail",
    "find",
    "grep",
    "locate",
    "chmod",
    "chown",
    "ln",
    "tree",
    "du",
    "df",
    "tar",
    "zip",
    "unzip",
    "gzip",
    "echo",
    "clear",
    "history",
    "exit",
    "which",
    "whoami",
    "sudo",
    "source",
    "export",
    "alias",
    # processes and system
    "ps",
    "top",
    "htop",
    "kill",
    "killall",
    "systemctl",
    "service",
    "journalctl",
    "uname",
    "reboot",
    "shutdown",
    # networking
    "curl",
    "wget",
    "ssh",
    "scp",
    "rsync",
    "ping",
    "netstat",
    "ifconfig",
    "traceroute",
    # editors
    "vim",
    "nvim",
    "nano",
    "emacs",
    "code",
    # package managers
    "apt",
    "apt-get",
    "brew",
    "pacman",
    "dnf",
    "yum",
    "snap",
    # build and languages
    "make",
    "cmake",
    "gcc",
    "cargo",
    "rustc",
    "go",
    "java",
    "javac",
    "mvn",
    "gradle",
    "ruby",
    "gem",
    "bundle",
    "php",
    "composer",
    "terraform",
    "ansible",
)


def builtin_entries() -> tuple[TypoEntry, ...]:
    """The compiled-in typo table as TypoEntry values."""
    return tuple(TypoEntry(wrong, correct) for wrong, correct in COMMON_FIXES)


def is_builtin_typo(wrong: str, correct: str | None = None) -> bool:
    """Check whether a pair overlaps the compiled-in table.

    True when ``wrong`` is a stored typo, or ``correct`` is a stored fix.
    """
    return any(w == wrong or (correct is not None and c == correct) for w, c in COMMON_FIXES)
