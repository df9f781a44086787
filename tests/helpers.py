from __future__ import annotations

DIV_BY_CALL = """
; My first program
mov  a, 5
inc  a
call function
msg  '(5+1)/2 = ', a    ; output message
end

function:
    div  a, 2
    ret
"""

FACTORIAL = """
mov   a, 5
mov   b, a
mov   c, a
call  proc_fact
call  print
end

proc_fact:
    dec   b
    mul   c, b
    cmp   b, 1
    jne   proc_fact
    ret

print:
    msg   a, '! = ', c ; output text
    ret
"""

NESTED_CALLS_NO_END = """
call  func1
call  print
end

func1:
    call  func2
    ret

func2:
    ret

print:
    msg 'This program should return null'
"""

JNE_TO_EXIT = """
            mov a, 173   ; instruction mov a, 173
            mov k, 88   ; instruction mov k, 88
            call func
            msg 'Random result: ', o
            end
            func:
              cmp a, k
              jne exit
              mov o, a
              add o, k
              ret
            ; Do nothing
            exit:
              msg 'Do nothing'"""

JL_NOT_TAKEN = """
            mov q, 86   ; instruction mov q, 86
            mov m, 73   ; instruction mov m, 73
            call func
            msg 'Random result: ', g
            end
            func:
              cmp q, m
              jl exit
              mov g, q
              div g, m
              ret
            ; Do nothing
            exit:
              msg 'Do nothing'"""

GCD = """
mov a, 81
mov b, 153
call gcd
msg 'gcd(', a, ', ', b, ') = ', c
end

gcd:
    mov c, a
    mov d, b
loop:
    cmp c, d
    je done
    jg bigger
    sub d, c
    jmp loop
bigger:
    sub c, d
    jmp loop
done:
    ret
"""
