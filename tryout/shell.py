"""
Shell integration scripts.

A child process can't change its parent's directory, so `tryout init <shell>`
prints a `gt` function that runs tryout and cds into the printed path.
"""

BASH_ZSH_INIT = '''# tryout shell integration
# Add this to your .bashrc or .zshrc:
#   eval "$(tryout init bash)"  # or zsh

gt() {
    local result
    result=$(tryout "$@")
    local exit_code=$?

    if [ $exit_code -eq 0 ] && [ -n "$result" ] && [ -d "$result" ]; then
        cd "$result"
    elif [ -n "$result" ]; then
        echo "$result"
    fi

    return $exit_code
}
'''

FISH_INIT = '''# tryout shell integration
# Add this to your config.fish:
#   tryout init fish | source

function gt
    set -l result (tryout $argv)
    set -l exit_code $status

    if test $exit_code -eq 0; and test -n "$result"; and test -d "$result"
        cd "$result"
    else if test -n "$result"
        echo "$result"
    end

    return $exit_code
end
'''

POWERSHELL_INIT = '''# tryout shell integration
# Add this to your PowerShell profile ($PROFILE):
#   tryout init powershell | Invoke-Expression

function gt {
    $result = tryout @args
    $exitCode = $LASTEXITCODE

    if ($exitCode -eq 0 -and $result -and (Test-Path -Path $result -PathType Container)) {
        Set-Location $result
    } elseif ($result) {
        Write-Output $result
    }

    return $exitCode
}
'''

SHELL_SCRIPTS = {
    "bash": BASH_ZSH_INIT,
    "zsh": BASH_ZSH_INIT,
    "fish": FISH_INIT,
    "powershell": POWERSHELL_INIT,
    "pwsh": POWERSHELL_INIT,
}


def init_script(shell: str) -> str:
    """Return the integration script for a shell name."""
    try:
        return SHELL_SCRIPTS[shell]
    except KeyError:
        raise ValueError(
            f"unsupported shell: {shell} (supported: bash, zsh, fish, powershell)"
        ) from None
